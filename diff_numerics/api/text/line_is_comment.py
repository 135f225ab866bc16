"""Comment line detection."""


def line_is_comment(line: str, prefix: str) -> bool:
    """Check whether a line is a comment line.

    Args:
        line: Raw line (trailing newline allowed)
        prefix: Comment prefix; an empty prefix disables comment detection

    Returns:
        True if, after leading spaces and tabs, the line starts with prefix.
        Blank lines are never comments.
    """
    if not prefix:
        return False
    content = line.lstrip(" \t")
    if not content.strip():
        return False
    return content.startswith(prefix)
