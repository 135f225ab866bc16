"""Structural mismatch dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StructuralMismatch:
    """Two paired lines that cannot be compared column by column.

    A line number of 0 means that side had already reached end of file.
    """

    line1: int
    line2: int
    n_tokens1: int
    n_tokens2: int

    @property
    def message(self) -> str:
        if self.line1 == 0 or self.line2 == 0:
            file_number, line_number = (2, self.line2) if self.line1 == 0 else (1, self.line1)
            return (
                f"File {file_number} has extra data at line {line_number} "
                f"after the other file ended (files have a different number of lines)"
            )
        return (
            f"Column count mismatch: line {self.line1} of file 1 has {self.n_tokens1} columns, "
            f"line {self.line2} of file 2 has {self.n_tokens2} columns"
        )
