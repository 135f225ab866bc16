"""Parse the --columns option."""

from ..api.compare.NumericDiffConfigError import NumericDiffConfigError


def _parse_columns(columns: str) -> frozenset[int]:
    """Parse a comma-separated list of 1-based column numbers.

    Args:
        columns: Text such as ``"1,3,4"``

    Returns:
        Set of column numbers

    Raises:
        NumericDiffConfigError: If an item is empty, not an integer, or below 1
    """
    parsed: set[int] = set()
    for item in columns.split(","):
        item = item.strip()
        try:
            number = int(item)
        except ValueError:
            raise NumericDiffConfigError([f"Invalid column number: {item!r} (expected a positive integer)."]) from None
        if number < 1:
            raise NumericDiffConfigError([f"Column numbers must be at least 1 (got {number})."])
        parsed.add(number)
    return frozenset(parsed)
