"""Whole-value highlighting."""

from ._ANSI import COLOR_START, RESET


def colorize_whole(text: str) -> str:
    return f"{COLOR_START}{text}{RESET}"
