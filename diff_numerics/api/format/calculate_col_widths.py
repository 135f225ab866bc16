"""Column width computation for aligned output."""

from collections.abc import Sequence

from .strip_escape import strip_escape


def calculate_col_widths(tokens1: Sequence[str], tokens2: Sequence[str]) -> list[int]:
    """Per-position width: the larger visible length of the two tokens.

    Only positions present in both sequences get a width.
    """
    return [max(len(strip_escape(t1)), len(strip_escape(t2))) for t1, t2 in zip(tokens1, tokens2)]
