from dataclasses import dataclass

@dataclass(slots=True)
class BoardLayout:
    """Screen geometry of the board; start is the bottom-left corner."""
    tile_size: float
    start_x: float
    start_y: float
