"""Column outcome dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnOutcome:
    """Comparison outcome for one token pair."""

    index: int  # 1-based column number
    is_difference: bool
    rendered: tuple[str, str]
    error_label: str
    width: int
    error: float = 0.0
