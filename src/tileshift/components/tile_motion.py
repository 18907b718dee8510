from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class TileMotion:
    """Interpolated render position of a tile (idle <-> animating)."""
    render_x: float = 0.0
    render_y: float = 0.0
    target_x: float = 0.0
    target_y: float = 0.0
    animating: bool = False

    def snap_to(self, x: float, y: float) -> None:
        self.render_x = self.target_x = float(x)
        self.render_y = self.target_y = float(y)
        self.animating = False

    def animate_to(self, x: float, y: float) -> None:
        self.target_x = float(x)
        self.target_y = float(y)
        if self.target_x != self.render_x or self.target_y != self.render_y:
            self.animating = True

    def reset(self) -> None:
        self.snap_to(0.0, 0.0)

    @property
    def render_position(self) -> Tuple[float, float]:
        return (self.render_x, self.render_y)

    @property
    def target_position(self) -> Tuple[float, float]:
        return (self.target_x, self.target_y)
