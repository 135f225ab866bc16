"""diff-numerics API - comparison engine and commands."""

from .StageResult import StageResult

__all__ = ["StageResult"]
