"""States of the paired-line comparison loop."""

from enum import Enum


class CompareState(Enum):
    ADVANCING = "advancing"
    COMPARING = "comparing"
    DRAIN_LEFT = "drain_left"
    DRAIN_RIGHT = "drain_right"
    DONE = "done"
