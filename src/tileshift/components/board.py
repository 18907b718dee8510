from dataclasses import dataclass, field
from typing import List, Optional

from tileshift.components.puzzle_mode import PuzzleMode

@dataclass(slots=True)
class Board:
    """Fixed square grid of tile entity ids, addressed as cells[y * size + x]."""
    size: int
    mode: PuzzleMode
    cells: List[int] = field(default_factory=list)
    # Only tracked while mode.has_empty_tile.
    empty_x: Optional[int] = None
    empty_y: Optional[int] = None
    won: bool = False

    def index(self, x: int, y: int) -> int:
        return y * self.size + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size
