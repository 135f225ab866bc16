"""Outcome kind of one compared line pair."""

from enum import Enum


class LineStatus(Enum):
    EQUAL = "equal"
    DIFFERENT = "different"
    INCOMPARABLE = "incomparable"  # token counts differ
