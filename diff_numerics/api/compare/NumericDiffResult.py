"""Numeric diff result dataclass."""

from dataclasses import dataclass

from .StructuralMismatch import StructuralMismatch


@dataclass
class NumericDiffResult:
    """Statistics accumulated over one comparison run."""

    n_different_lines: int = 0
    max_percentage_err: float = 0.0
    n_compared_lines: int = 0
    mismatch: StructuralMismatch | None = None

    @property
    def is_comparable(self) -> bool:
        return self.mismatch is None

    @property
    def is_equal(self) -> bool:
        return self.is_comparable and self.n_different_lines == 0

    def add_line(self, is_different: bool, error: float) -> None:
        self.n_compared_lines += 1
        if is_different:
            self.n_different_lines += 1
            if error > self.max_percentage_err:
                self.max_percentage_err = error
