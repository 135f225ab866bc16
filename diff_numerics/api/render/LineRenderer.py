"""Base class for line renderers."""

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ..compare.LineComparison import LineComparison


class LineRenderer(ABC):
    """Base class for line renderers.

    Output goes to ``stream``; when no stream is given the current
    ``sys.stdout`` is looked up at write time.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    @abstractmethod
    def render(self, line: "LineComparison") -> None:
        """Render one compared line pair.

        Args:
            line: Outcome of comparing one pair of non-comment lines
        """
        pass
