"""Make sure a colored string does not bleed color."""

from ._ANSI import RESET, SGR_PATTERN, is_reset_params


def ensure_reset(text: str) -> str:
    """Append a reset if the last color start comes after the last reset."""
    last_start = -1
    last_reset = -1
    for match in SGR_PATTERN.finditer(text):
        if is_reset_params(match.group(1)):
            last_reset = match.start()
        else:
            last_start = match.start()
    if last_start > last_reset:
        return text + RESET
    return text
