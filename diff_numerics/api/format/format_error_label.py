"""Percentage error labels."""


def format_error_label(error: float, width: int) -> str:
    """Format a percentage error right-justified to width, suffixed with ``%``.

    Uses ``%g`` style (six significant digits), so the sentinel for an
    order-of-magnitude mismatch renders as ``1e+99%``.
    """
    return f"{error:>{width}g}%"
