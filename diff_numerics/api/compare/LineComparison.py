"""Line comparison dataclass."""

from dataclasses import dataclass, field

from .ColumnOutcome import ColumnOutcome
from .LineStatus import LineStatus


@dataclass(frozen=True)
class LineComparison:
    """Comparison outcome for one pair of non-comment lines."""

    status: LineStatus
    n_tokens1: int
    n_tokens2: int
    columns: list[ColumnOutcome] = field(default_factory=list)
    max_error: float = 0.0

    @property
    def is_different(self) -> bool:
        return self.status is LineStatus.DIFFERENT
