from dataclasses import dataclass
from typing import Any

from tileshift.constants import BOARD_SIZE, EMPTY_TILE_ID

@dataclass(slots=True)
class PuzzleTile:
    """Identity and grid placement of one tile.

    solved_x/solved_y never change after creation; current_x/current_y are
    rewritten only by board operations. Render state lives in TileMotion.
    """
    tile_id: int
    solved_x: int
    solved_y: int
    current_x: int
    current_y: int
    artwork: Any = None
    is_empty: bool = False

    @classmethod
    def empty(cls, x: int, y: int) -> "PuzzleTile":
        return cls(tile_id=EMPTY_TILE_ID, solved_x=x, solved_y=y, current_x=x, current_y=y, is_empty=True)

    def set_grid_position(self, x: int, y: int) -> None:
        self.current_x = x
        self.current_y = y

    @property
    def in_solved_position(self) -> bool:
        return self.current_x == self.solved_x and self.current_y == self.solved_y

    @property
    def solved_rank(self) -> int:
        return self.solved_y * BOARD_SIZE + self.solved_x
