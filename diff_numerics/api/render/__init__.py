"""Render module - per-line output of comparison results."""

from .LineRenderer import LineRenderer
from .SideBySideRenderer import SideBySideRenderer
from .UnifiedRenderer import UnifiedRenderer
from .get_renderer import get_renderer

__all__ = [
    "LineRenderer",
    "SideBySideRenderer",
    "UnifiedRenderer",
    "get_renderer",
]
