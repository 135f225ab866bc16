"""Split a line into whitespace-separated tokens."""


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace.

    Leading and trailing whitespace is ignored, so an empty or blank line
    yields an empty list.
    """
    return line.split()
