"""Headless puzzle session: one world, one board and the systems that drive it.

Front ends hold a TilePuzzle and call its methods (or emit command events on
``puzzle.event_bus``); nothing here touches windowing or textures.
"""
from __future__ import annotations

import random
from typing import Any, Sequence

from tileshift.components.board import Board
from tileshift.components.board_layout import BoardLayout
from tileshift.components.puzzle_mode import PuzzleMode
from tileshift.components.puzzle_tile import PuzzleTile
from tileshift.components.tile_motion import TileMotion
from tileshift.events.bus import EVENT_LAYOUT_CHANGED, EventBus
from tileshift.systems.animation import AnimationSystem, get_layout
from tileshift.systems.puzzle_board import PuzzleBoardSystem
from tileshift.ui.layout import layout_for_window
from tileshift.world import create_world


class TilePuzzle:
    def __init__(
        self,
        mode: PuzzleMode = PuzzleMode.CLASSIC,
        *,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.mode = mode
        self.event_bus = event_bus or EventBus()
        self.world = create_world(rng=rng)
        self.board_system = PuzzleBoardSystem(self.world, self.event_bus, mode)
        self.animation_system = AnimationSystem(self.world, self.event_bus)

    def initialize_board(self, cell_source: Sequence[Any] | None = None, *, shuffle: bool = True) -> Board:
        return self.board_system.initialize_board(cell_source, shuffle=shuffle)

    def set_viewport(self, width: float, height: float) -> BoardLayout:
        """Recompute the board layout for a window size and snap tiles onto it."""
        layout = layout_for_window(width, height)
        current = get_layout(self.world)
        if current is None:
            self.world.create_entity(layout)
        else:
            current.tile_size = layout.tile_size
            current.start_x = layout.start_x
            current.start_y = layout.start_y
        self.event_bus.emit(
            EVENT_LAYOUT_CHANGED,
            tile_size=layout.tile_size,
            start_x=layout.start_x,
            start_y=layout.start_y,
        )
        return get_layout(self.world)

    @property
    def layout(self) -> BoardLayout | None:
        return get_layout(self.world)

    def move_tile(self, x: int, y: int) -> bool:
        return self.board_system.move_tile(x, y)

    def rotate_sub_board(self, index: int) -> bool:
        return self.board_system.rotate_sub_board(index)

    def get_sub_board_at_position(self, x: int, y: int) -> int | None:
        return self.board_system.get_sub_board_at_position(x, y)

    def shift_column_up(self, column: int) -> None:
        self.board_system.shift_column_up(column)

    def shift_column_down(self, column: int) -> None:
        self.board_system.shift_column_down(column)

    def shift_row_left(self, row: int) -> None:
        self.board_system.shift_row_left(row)

    def shift_row_right(self, row: int) -> None:
        self.board_system.shift_row_right(row)

    def update(self, dt: float) -> None:
        self.animation_system.update(dt)

    def reset(self) -> None:
        self.board_system.reset()

    def is_won(self) -> bool:
        return self.board_system.is_won()

    def is_animating(self) -> bool:
        return self.animation_system.is_animating()

    def get_tile(self, x: int, y: int) -> PuzzleTile | None:
        return self.board_system.get_tile(x, y)

    def get_motion(self, x: int, y: int) -> TileMotion | None:
        return self.board_system.get_motion(x, y)

    @property
    def empty_position(self) -> tuple[int, int] | None:
        return self.board_system.empty_position
