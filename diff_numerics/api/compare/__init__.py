"""Compare module - numeric file comparison engine."""

from .cmd_compare import cmd_compare
from .ColumnOutcome import ColumnOutcome
from .CompareState import CompareState
from .LineComparison import LineComparison
from .LineStatus import LineStatus
from .NumericDiff import NumericDiff
from .NumericDiffConfig import NumericDiffConfig
from .NumericDiffConfigError import NumericDiffConfigError
from .NumericDiffResult import NumericDiffResult
from .percentage_difference import BIG, percentage_difference
from .StructuralMismatch import StructuralMismatch

__all__ = [
    "BIG",
    "ColumnOutcome",
    "CompareState",
    "LineComparison",
    "LineStatus",
    "NumericDiff",
    "NumericDiffConfig",
    "NumericDiffConfigError",
    "NumericDiffResult",
    "StructuralMismatch",
    "cmd_compare",
    "percentage_difference",
]
