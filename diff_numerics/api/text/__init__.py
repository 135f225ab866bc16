"""Text module - line tokenization and classification."""

from .is_numeric_token import is_numeric_token
from .line_is_comment import line_is_comment
from .tokenize import tokenize

__all__ = [
    "is_numeric_token",
    "line_is_comment",
    "tokenize",
]
