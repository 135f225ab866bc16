"""Unified diff style renderer (UNO: single class)."""

from typing import TYPE_CHECKING

from ..format.has_color import has_color
from .LineRenderer import LineRenderer

if TYPE_CHECKING:
    from ..compare.LineComparison import LineComparison


class UnifiedRenderer(LineRenderer):
    """Print differing lines as a ``<`` / ``>`` / ``>>`` block.

    Lines whose rendering carries no color are identical within tolerance
    and are not printed.
    """

    def render(self, line: "LineComparison") -> None:
        output1 = " ".join(column.rendered[0] for column in line.columns)
        output2 = " ".join(column.rendered[1] for column in line.columns)
        if not (has_color(output1) or has_color(output2)):
            return

        errors = " ".join(column.error_label for column in line.columns)
        self.write_line()
        self.write_line(f"< {output1}")
        self.write_line(f"> {output2}")
        self.write_line(f">>{errors}")
