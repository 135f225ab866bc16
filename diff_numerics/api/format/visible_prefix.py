"""Escape-aware truncation."""

from ._ANSI import ESCAPE_INTRODUCER
from .ensure_reset import ensure_reset


def visible_prefix(text: str, n: int) -> str:
    """Extract the first n visible characters, preserving escape sequences.

    Escape sequences between visible characters are kept as-is, including
    any that directly follow the n-th visible character. A dangling
    unterminated sequence is dropped, and a reset is appended when a color
    start would otherwise stay open past the truncation point.

    Args:
        text: String possibly containing ANSI escape sequences
        n: Number of visible characters to keep

    Returns:
        Truncated string whose color is always terminated
    """
    result: list[str] = []
    visible_count = 0
    escape_start = -1
    i = 0
    while i < len(text):
        char = text[i]
        if escape_start >= 0:
            if char == "m":
                result.append(text[escape_start : i + 1])
                escape_start = -1
        elif text.startswith(ESCAPE_INTRODUCER, i):
            escape_start = i
            i += 1  # skip "["
        elif visible_count < n:
            result.append(char)
            visible_count += 1
        else:
            break
        i += 1
    return ensure_reset("".join(result))
