"""Output schemas for compare commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class CompareOutput(BaseOutputSchema):
    """Output schema for the compare command.

    Output structure:
    - errors: list[str] - configuration, I/O or structural errors; empty on success
    - warnings: list[str] - warning messages
    - file1, file2: str - the compared paths
    - tolerance, threshold: float - options the run used
    - n_compared_lines: int - number of paired non-comment lines compared
    - n_different_lines: int - lines with at least one differing column
    - max_percentage_err: float - largest percentage error among differing columns
    - is_equal: bool - True when no line differs and the files are comparable
    """

    file1: str = Field(..., description="Path of the first file")
    file2: str = Field(..., description="Path of the second file")
    tolerance: float = Field(..., description="Relative tolerance (1e-2 is 1%)")
    threshold: float = Field(..., description="Absolute magnitude below which values count as zero")
    n_compared_lines: int = Field(0, description="Number of paired non-comment lines compared")
    n_different_lines: int = Field(0, description="Number of lines with at least one differing column")
    max_percentage_err: float = Field(0.0, description="Largest percentage error found")
    is_equal: bool = Field(False, description="True when files are comparable and no line differs")


register_output_schema("compare", "compare", CompareOutput)
