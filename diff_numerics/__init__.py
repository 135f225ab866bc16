"""diff-numerics - compare numeric data files within a tolerance."""

from .api.compare import NumericDiff, NumericDiffConfig, NumericDiffResult, cmd_compare

__all__ = [
    "NumericDiff",
    "NumericDiffConfig",
    "NumericDiffResult",
    "cmd_compare",
]
