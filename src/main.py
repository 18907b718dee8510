"""Entry point for the Tile Shift puzzle prototype.

Sets up a puzzle session and an Arcade window that draws it and turns clicks
and keys into board commands.
"""
import arcade
from arcade import Window, run, set_background_color, color

from tileshift.components.puzzle_mode import PuzzleMode
from tileshift.constants import BOARD_SIZE, SUB_BOARD_ANCHORS, VIRTUAL_HEIGHT, VIRTUAL_WIDTH
from tileshift.events.bus import (
    EVENT_PUZZLE_RESET_REQUEST,
    EVENT_PUZZLE_SOLVED,
    EVENT_ROTATE_REQUEST,
    EVENT_SHIFT_REQUEST,
    EVENT_TICK,
    EVENT_TILE_CLICK,
)
from tileshift.puzzle import TilePuzzle
from tileshift.systems.variants import ShiftKind
from tileshift.ui.layout import point_to_cell, sub_board_center
from tileshift.utils.image_cells import slice_image

MODE_KEYS = {
    arcade.key.KEY_1: PuzzleMode.CLASSIC,
    arcade.key.KEY_2: PuzzleMode.ROTATE,
    arcade.key.KEY_3: PuzzleMode.SHIFT,
}
SHIFT_KEYS = {
    arcade.key.UP: ShiftKind.UP,
    arcade.key.DOWN: ShiftKind.DOWN,
    arcade.key.LEFT: ShiftKind.LEFT,
    arcade.key.RIGHT: ShiftKind.RIGHT,
}
ROTATE_BUTTON_RADIUS = 14
TILE_GAP = 2


def region_color(region):
    # Stand-in artwork: a gradient sampled at the region's corner.
    r = 60 + int(160 * region.left / VIRTUAL_WIDTH)
    g = 60 + int(160 * region.bottom / VIRTUAL_HEIGHT)
    return (r, g, 150)


class TileShiftWindow(Window):
    def __init__(self):
        super().__init__(VIRTUAL_WIDTH, VIRTUAL_HEIGHT, "Tile Shift")
        self.set_update_rate(1/60)
        self.selected_cell = None
        self.solved_banner = False
        self.start_session(PuzzleMode.CLASSIC)
        set_background_color(color.MIDNIGHT_BLUE)

    def start_session(self, mode: PuzzleMode):
        self.puzzle = TilePuzzle(mode)
        self.puzzle.event_bus.subscribe(EVENT_PUZZLE_SOLVED, self.on_puzzle_solved)
        self.puzzle.set_viewport(self.width, self.height)
        self.puzzle.initialize_board(slice_image(VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
        self.selected_cell = None
        self.solved_banner = False

    def on_puzzle_solved(self, sender, **kwargs):
        self.solved_banner = True

    def on_resize(self, width: int, height: int):
        # pyglet may dispatch a resize before the session exists.
        if hasattr(self, 'puzzle'):
            self.puzzle.set_viewport(width, height)
        return super().on_resize(width, height)

    def on_update(self, delta_time: float):
        self.puzzle.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_draw(self):
        self.clear()
        layout = self.puzzle.layout
        size = layout.tile_size
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                tile = self.puzzle.get_tile(x, y)
                if tile is None or tile.is_empty:
                    continue
                motion = self.puzzle.get_motion(x, y)
                left, bottom = motion.render_position
                arcade.draw_lbwh_rectangle_filled(left + TILE_GAP, bottom + TILE_GAP,
                                                  size - 2 * TILE_GAP, size - 2 * TILE_GAP,
                                                  region_color(tile.artwork))
                arcade.draw_text(str(tile.tile_id + 1), left + size / 2, bottom + size / 2,
                                 color.WHITE, 18, anchor_x="center", anchor_y="center")
        if self.selected_cell is not None:
            x, y = self.selected_cell
            motion = self.puzzle.get_motion(x, y)
            left, bottom = motion.target_position
            arcade.draw_lbwh_rectangle_outline(left, bottom, size, size, color.YELLOW, 3)
        if self.puzzle.mode is PuzzleMode.ROTATE:
            for index in range(len(SUB_BOARD_ANCHORS)):
                cx, cy = self._rotate_button_center(index)
                arcade.draw_circle_filled(cx, cy, ROTATE_BUTTON_RADIUS, color.DARK_SLATE_GRAY)
                arcade.draw_text(str(index + 1), cx, cy, color.WHITE, 11,
                                 anchor_x="center", anchor_y="center")
        hint = f"{self.puzzle.mode.name.title()}  |  1/2/3 mode, R reset"
        if self.puzzle.mode is PuzzleMode.SHIFT:
            hint += ", click a tile then use arrow keys"
        arcade.draw_text(hint, 20, self.height - 40, color.LIGHT_GRAY, 14)
        if self.solved_banner:
            arcade.draw_text("Puzzle Solved!", self.width / 2, self.height - 80, color.GOLD, 24,
                             anchor_x="center")

    def _rotate_button_center(self, index: int):
        return sub_board_center(self.puzzle.layout, index)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if button != arcade.MOUSE_BUTTON_LEFT:
            return
        bus = self.puzzle.event_bus
        if self.puzzle.mode is PuzzleMode.ROTATE:
            for index in range(len(SUB_BOARD_ANCHORS)):
                cx, cy = self._rotate_button_center(index)
                if (x - cx) ** 2 + (y - cy) ** 2 <= ROTATE_BUTTON_RADIUS ** 2:
                    bus.emit(EVENT_ROTATE_REQUEST, index=index)
                    return
        cell = point_to_cell(self.puzzle.layout, x, y)
        if cell is None:
            return
        if self.puzzle.mode is PuzzleMode.SHIFT:
            self.selected_cell = cell
            return
        bus.emit(EVENT_TILE_CLICK, x=cell[0], y=cell[1])

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in MODE_KEYS:
            self.start_session(MODE_KEYS[symbol])
            return
        if symbol == arcade.key.R:
            self.solved_banner = False
            self.puzzle.event_bus.emit(EVENT_PUZZLE_RESET_REQUEST)
            return
        kind = SHIFT_KEYS.get(symbol)
        if kind is None or self.selected_cell is None:
            return
        x, y = self.selected_cell
        index = x if kind in (ShiftKind.UP, ShiftKind.DOWN) else y
        self.puzzle.event_bus.emit(EVENT_SHIFT_REQUEST, kind=kind, index=index)


def main():
    TileShiftWindow()
    run()

if __name__ == "__main__":
    main()
