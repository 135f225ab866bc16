"""Numeric diff configuration model (UNO: single model)."""

from dataclasses import dataclass, field, fields
from typing import Any

from .NumericDiffConfigError import NumericDiffConfigError

MIN_TOLERANCE = 1e-15
MAX_TOLERANCE = 1e3
MIN_THRESHOLD = 0.0
MAX_THRESHOLD = 1e3
MIN_LINE_LENGTH = 10
MAX_LINE_LENGTH = 200


@dataclass(frozen=True)
class NumericDiffConfig:
    """Options for comparing two numeric data files.

    Immutable once built. Construction validates every field and raises a
    single NumericDiffConfigError listing all problems.

    ``tolerance`` is relative (``1e-2`` means 1%); ``threshold`` is the
    absolute magnitude below which values count as zero.
    """

    file1: str
    file2: str
    side_by_side: bool = False
    tolerance: float = 1e-2
    threshold: float = 1e-6
    comment_prefix: str = "#"
    suppress_common_lines: bool = False
    only_equal: bool = False
    quiet: bool = False
    line_length: int = 60
    color_diff_digits: bool = False
    columns_to_compare: frozenset[int] = field(default_factory=frozenset)

    def _validate_files(self) -> list[str]:
        errors: list[str] = []
        if not self.file1 or not self.file2:
            errors.append("Two input files must be specified.")
        elif self.file1 == self.file2:
            errors.append("The two input files must be different.")
        return errors

    def _validate_ranges(self) -> list[str]:
        errors: list[str] = []
        if not isinstance(self.line_length, int) or isinstance(self.line_length, bool):
            errors.append(f"Column width must be an int (found: {type(self.line_length).__name__})")
        elif not MIN_LINE_LENGTH <= self.line_length <= MAX_LINE_LENGTH:
            errors.append(
                f"Column width ({self.line_length}) must be between {MIN_LINE_LENGTH} and {MAX_LINE_LENGTH}."
            )
        if not isinstance(self.tolerance, (int, float)) or isinstance(self.tolerance, bool):
            errors.append(f"Tolerance must be a number (found: {type(self.tolerance).__name__})")
        elif not MIN_TOLERANCE <= self.tolerance <= MAX_TOLERANCE:
            errors.append(f"Tolerance ({self.tolerance:g}) must be between {MIN_TOLERANCE:g} and {MAX_TOLERANCE:g}.")
        if not isinstance(self.threshold, (int, float)) or isinstance(self.threshold, bool):
            errors.append(f"Threshold must be a number (found: {type(self.threshold).__name__})")
        elif not MIN_THRESHOLD <= self.threshold <= MAX_THRESHOLD:
            errors.append(f"Threshold ({self.threshold:g}) must be between {MIN_THRESHOLD:g} and {MAX_THRESHOLD:g}.")
        return errors

    def _validate_columns(self) -> list[str]:
        bad = sorted((c for c in self.columns_to_compare if not isinstance(c, int) or c < 1), key=str)
        if bad:
            return [f"Column numbers must be at least 1 (got {', '.join(str(c) for c in bad)})."]
        return []

    def __post_init__(self):
        """Validate configuration after initialization.

        Collects all validation errors and raises a single NumericDiffConfigError
        with all errors, so the user can see everything that needs fixing.
        """
        # Accept any iterable of column numbers from callers
        object.__setattr__(self, "columns_to_compare", frozenset(self.columns_to_compare))

        errors: list[str] = []
        errors.extend(self._validate_files())
        errors.extend(self._validate_ranges())
        errors.extend(self._validate_columns())

        if errors:
            raise NumericDiffConfigError(errors)

    @property
    def tolerance_percent(self) -> float:
        """Tolerance expressed in percent, the unit of percentage differences."""
        return self.tolerance * 100.0

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> "NumericDiffConfig":
        """Load configuration from a plain dict.

        Args:
            config: Dict with ``file1``, ``file2`` and any optional option keys

        Returns:
            NumericDiffConfig instance

        Raises:
            NumericDiffConfigError: If keys are unknown or values are invalid
        """
        if not isinstance(config, dict):
            raise NumericDiffConfigError([f"config must be a dict (found: {type(config).__name__})"])

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise NumericDiffConfigError([f"Unknown option(s): {', '.join(unknown)}"])

        return cls(
            file1=str(config.get("file1") or ""),
            file2=str(config.get("file2") or ""),
            **{k: v for k, v in config.items() if k not in ("file1", "file2")},
        )
