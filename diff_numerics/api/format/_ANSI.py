"""ANSI SGR escape codes used for highlighting."""

import re

ESCAPE_INTRODUCER = "\033["
COLOR_START = "\033[31m"  # red
RESET = "\033[0m"

# Complete SGR sequences; group 1 holds the parameters ("" and "0" both reset)
SGR_PATTERN = re.compile(r"\033\[([0-9;]*)m")


def is_reset_params(params: str) -> bool:
    return params in ("", "0")
