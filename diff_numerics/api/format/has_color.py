"""Color detection."""

from ._ANSI import SGR_PATTERN, is_reset_params


def has_color(text: str) -> bool:
    """Return True if the string contains a color start sequence."""
    return any(not is_reset_params(match.group(1)) for match in SGR_PATTERN.finditer(text))
