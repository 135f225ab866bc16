"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    1. announce: what the command is about to do
    2. progress_callback: generator doing the work, yielding (fraction, message)
    3. result: one-line outcome set by the callback
    4. output: structured output dict set by the callback
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
