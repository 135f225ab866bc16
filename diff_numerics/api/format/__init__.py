"""Format module - ANSI escape aware string utilities."""

from ._ANSI import COLOR_START, ESCAPE_INTRODUCER, RESET
from .calculate_col_widths import calculate_col_widths
from .colorize_diff_digits import colorize_diff_digits
from .colorize_whole import colorize_whole
from .ensure_reset import ensure_reset
from .format_error_label import format_error_label
from .has_color import has_color
from .strip_escape import strip_escape
from .visible_prefix import visible_prefix

__all__ = [
    "COLOR_START",
    "ESCAPE_INTRODUCER",
    "RESET",
    "calculate_col_widths",
    "colorize_diff_digits",
    "colorize_whole",
    "ensure_reset",
    "format_error_label",
    "has_color",
    "strip_escape",
    "visible_prefix",
]
