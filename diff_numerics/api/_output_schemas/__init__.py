"""Output schemas for API commands - enforces consistent output structure."""

from . import compare
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "compare",
    "get_output_schema",
    "register_output_schema",
]
