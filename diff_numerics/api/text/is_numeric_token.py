"""Numeric token classification."""


def is_numeric_token(token: str) -> bool:
    """Check whether the whole token parses as a floating-point number.

    Scientific notation is accepted. Partial parses such as ``12abc`` are
    rejected, as are forms only Python's float() understands (surrounding
    whitespace, digit-group underscores, an explicit leading ``+``).
    """
    if not token or token != token.strip() or "_" in token or token[0] == "+":
        return False
    try:
        float(token)
    except ValueError:
        return False
    return True
