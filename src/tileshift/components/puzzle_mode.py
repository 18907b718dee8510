"""Puzzle variant selected when a session starts."""
from enum import Enum, auto


class PuzzleMode(Enum):
    """Interaction variants; each owns its move set and shuffle rule."""
    CLASSIC = auto()  # 15-puzzle sliding into one empty cell
    ROTATE = auto()   # clockwise rotation of overlapping 2x2 sub-boards
    SHIFT = auto()    # cyclic shifts of whole rows and columns

    @property
    def has_empty_tile(self) -> bool:
        return self is PuzzleMode.CLASSIC
