"""Get line renderer helper."""

from typing import TYPE_CHECKING, TextIO

from .LineRenderer import LineRenderer
from .SideBySideRenderer import SideBySideRenderer
from .UnifiedRenderer import UnifiedRenderer

if TYPE_CHECKING:
    from ..compare.NumericDiffConfig import NumericDiffConfig


def get_renderer(config: "NumericDiffConfig", stream: TextIO | None = None) -> LineRenderer | None:
    """Get the line renderer selected by the configuration.

    Args:
        config: Validated comparison configuration
        stream: Output stream (default: sys.stdout at write time)

    Returns:
        Renderer instance, or None when per-line output is disabled
        (``only_equal`` or ``quiet``)
    """
    if config.only_equal or config.quiet:
        return None
    if config.side_by_side:
        return SideBySideRenderer(
            line_length=config.line_length,
            suppress_common_lines=config.suppress_common_lines,
            stream=stream,
        )
    return UnifiedRenderer(stream=stream)
