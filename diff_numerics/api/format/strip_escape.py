"""Remove ANSI escape sequences from a string."""

from ._ANSI import ESCAPE_INTRODUCER


def strip_escape(text: str) -> str:
    """Remove every ``ESC [ ... m`` sequence, leaving only visible characters.

    An unterminated sequence is consumed to the end of the string.
    """
    result: list[str] = []
    in_escape = False
    i = 0
    while i < len(text):
        char = text[i]
        if in_escape:
            if char == "m":
                in_escape = False
        elif text.startswith(ESCAPE_INTRODUCER, i):
            in_escape = True
            i += 1  # skip "["
        else:
            result.append(char)
        i += 1
    return "".join(result)
