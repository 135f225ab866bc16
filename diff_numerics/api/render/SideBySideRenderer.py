"""Side-by-side renderer (UNO: single class)."""

from typing import TYPE_CHECKING, TextIO

from ..format.has_color import has_color
from ..format.strip_escape import strip_escape
from ..format.visible_prefix import visible_prefix
from .LineRenderer import LineRenderer

if TYPE_CHECKING:
    from ..compare.LineComparison import LineComparison

DIFF_SEPARATOR = "   |   "
PLAIN_SEPARATOR = "       "


class SideBySideRenderer(LineRenderer):
    """Print both lines next to each other with aligned columns.

    A column is padded to the larger of its computed width and the visible
    length of either token, so numeric values are never cut inside the
    column layout. Each side is then truncated to ``line_length`` visible
    characters.
    """

    def __init__(self, line_length: int, suppress_common_lines: bool = False, stream: TextIO | None = None):
        super().__init__(stream)
        self.line_length = line_length
        self.suppress_common_lines = suppress_common_lines

    def render(self, line: "LineComparison") -> None:
        if self.suppress_common_lines and not line.is_different:
            return

        cells1: list[str] = []
        cells2: list[str] = []
        for column in line.columns:
            token1, token2 = column.rendered
            visible1 = len(strip_escape(token1))
            visible2 = len(strip_escape(token2))
            width = max(column.width, visible1, visible2)
            cells1.append(token1 + " " * (width - visible1))
            cells2.append(token2 + " " * (width - visible2))

        left = " ".join(cells1)
        right = " ".join(cells2)
        separator = DIFF_SEPARATOR if has_color(left) or has_color(right) else PLAIN_SEPARATOR
        left = visible_prefix(left, self.line_length)
        right = visible_prefix(right, self.line_length)
        self.write_line(f"{left}{separator}{right}")
