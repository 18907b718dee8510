from __future__ import annotations

import logging
import random
from typing import Any, Sequence

from esper import World

from tileshift.components.board import Board
from tileshift.components.puzzle_mode import PuzzleMode
from tileshift.components.puzzle_tile import PuzzleTile
from tileshift.components.tile_motion import TileMotion
from tileshift.constants import BOARD_SIZE, SUB_BOARD_ANCHORS, TOTAL_TILES
from tileshift.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_INITIALIZED,
    EVENT_BOARD_SHUFFLED,
    EVENT_LINE_SHIFTED,
    EVENT_PUZZLE_RESET_REQUEST,
    EVENT_PUZZLE_SOLVED,
    EVENT_ROTATE_REQUEST,
    EVENT_SHIFT_REQUEST,
    EVENT_SUB_BOARD_ROTATED,
    EVENT_TILE_CLICK,
    EVENT_TILE_MOVED,
    EventBus,
)
from tileshift.systems.animation import any_animating
from tileshift.systems.grid_ops import (
    build_board,
    check_win,
    destroy_board,
    motion_at,
    tile_at,
)
from tileshift.systems.variants import ShiftKind, rules_for
from tileshift.systems.variants import rotate, shift

logger = logging.getLogger(__name__)


class PuzzleBoardSystem:
    """Owns the puzzle board entity and applies the active variant's moves.

    Direct method calls always act. Command events coming from a front end are
    dropped while tiles are still animating.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        mode: PuzzleMode = PuzzleMode.CLASSIC,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.mode = mode
        self.rules = rules_for(mode)
        candidate_rng = rng or getattr(world, "random", None)
        self._rng: random.Random = candidate_rng or random.Random()
        self.board_entity: int | None = None
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_ROTATE_REQUEST, self.on_rotate_request)
        self.event_bus.subscribe(EVENT_SHIFT_REQUEST, self.on_shift_request)
        self.event_bus.subscribe(EVENT_PUZZLE_RESET_REQUEST, self.on_reset_request)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize_board(self, cell_source: Sequence[Any] | None = None, *, shuffle: bool = True) -> Board:
        """Build a fresh board from 16 artwork handles (row-major), then shuffle it."""
        if cell_source is None:
            artwork = list(range(TOTAL_TILES))
        else:
            artwork = list(cell_source)
            if len(artwork) != TOTAL_TILES:
                raise ValueError(f"cell source must provide {TOTAL_TILES} cells, got {len(artwork)}")
        if self.board_entity is not None:
            destroy_board(self.world, self.board_entity)
        self.board_entity = build_board(self.world, BOARD_SIZE, self.mode, artwork)
        if shuffle:
            self._shuffle(reason="initialize")
        self.event_bus.emit(EVENT_BOARD_INITIALIZED, mode=self.mode, shuffled=shuffle)
        return self.board

    def reset(self) -> None:
        """Re-shuffle the current board in place, keeping the mode."""
        if self.board_entity is None:
            return
        self._shuffle(reason="reset")

    def _shuffle(self, reason: str) -> None:
        board = self.board
        self.rules.shuffle(self.world, board, self._rng)
        board.won = check_win(self.world, board)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s board shuffled (%s), solvable=%s", self.mode.name, reason,
                         self.rules.is_solvable(self.world, board))
        self.event_bus.emit(EVENT_BOARD_SHUFFLED, mode=self.mode, reason=reason)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def board(self) -> Board | None:
        if self.board_entity is None:
            return None
        return self.world.component_for_entity(self.board_entity, Board)

    def get_tile(self, x: int, y: int) -> PuzzleTile | None:
        board = self.board
        if board is None:
            return None
        return tile_at(self.world, board, x, y)

    def get_motion(self, x: int, y: int) -> TileMotion | None:
        board = self.board
        if board is None:
            return None
        return motion_at(self.world, board, x, y)

    def is_won(self) -> bool:
        board = self.board
        return board is not None and board.won

    def is_solvable(self) -> bool:
        board = self.board
        return board is not None and self.rules.is_solvable(self.world, board)

    @property
    def empty_position(self) -> tuple[int, int] | None:
        board = self.board
        if board is None or board.empty_x is None:
            return None
        return board.empty_x, board.empty_y

    def get_sub_board_at_position(self, x: int, y: int) -> int | None:
        return rotate.sub_board_at(x, y)

    # ------------------------------------------------------------------
    # Classic
    # ------------------------------------------------------------------
    def move_tile(self, x: int, y: int) -> bool:
        board = self.board
        if board is None:
            return False
        tile = tile_at(self.world, board, x, y)
        if tile is None:
            return False
        src = (tile.current_x, tile.current_y)
        if not self.rules.primary_move(self.world, board, x, y):
            return False
        self.event_bus.emit(EVENT_TILE_MOVED, tile_id=tile.tile_id, src=src,
                            dst=(tile.current_x, tile.current_y))
        self._after_move(board, reason="move")
        return True

    # ------------------------------------------------------------------
    # Rotate
    # ------------------------------------------------------------------
    def rotate_sub_board(self, index: int) -> bool:
        board = self.board
        if board is None or self.mode is not PuzzleMode.ROTATE:
            return False
        if not rotate.rotate_sub_board(self.world, board, index):
            return False
        self.event_bus.emit(EVENT_SUB_BOARD_ROTATED, index=index, anchor=SUB_BOARD_ANCHORS[index])
        self._after_move(board, reason="rotate")
        return True

    # ------------------------------------------------------------------
    # Shift
    # ------------------------------------------------------------------
    # Out-of-range indices are silently ignored, unlike move_tile's bool result.
    def shift_column_up(self, column: int) -> None:
        self._shift(ShiftKind.UP, column)

    def shift_column_down(self, column: int) -> None:
        self._shift(ShiftKind.DOWN, column)

    def shift_row_left(self, row: int) -> None:
        self._shift(ShiftKind.LEFT, row)

    def shift_row_right(self, row: int) -> None:
        self._shift(ShiftKind.RIGHT, row)

    def _shift(self, kind: ShiftKind, index: int) -> None:
        board = self.board
        if board is None or self.mode is not PuzzleMode.SHIFT:
            return
        if not shift.shift_line(self.world, board, kind, index):
            return
        self.event_bus.emit(EVENT_LINE_SHIFTED, kind=kind, index=index)
        self._after_move(board, reason="shift")

    def _after_move(self, board: Board, reason: str) -> None:
        was_won = board.won
        board.won = check_win(self.world, board)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason)
        if board.won and not was_won:
            logger.debug("%s puzzle solved", self.mode.name)
            self.event_bus.emit(EVENT_PUZZLE_SOLVED, mode=self.mode)

    # ------------------------------------------------------------------
    # Command events
    # ------------------------------------------------------------------
    def _input_locked(self) -> bool:
        return self.board_entity is None or any_animating(self.world)

    def on_tile_click(self, sender, **payload):
        if self._input_locked():
            return
        try:
            x = int(payload.get('x'))
            y = int(payload.get('y'))
        except (TypeError, ValueError):
            return
        if self.mode is PuzzleMode.CLASSIC:
            self.move_tile(x, y)
        elif self.mode is PuzzleMode.ROTATE:
            index = rotate.sub_board_at(x, y)
            if index is not None:
                self.rotate_sub_board(index)
        # Shift mode needs a direction; clicks alone do nothing.

    def on_rotate_request(self, sender, **payload):
        if self._input_locked():
            return
        try:
            index = int(payload.get('index'))
        except (TypeError, ValueError):
            return
        self.rotate_sub_board(index)

    def on_shift_request(self, sender, **payload):
        if self._input_locked():
            return
        kind = payload.get('kind')
        try:
            kind = ShiftKind(kind) if not isinstance(kind, ShiftKind) else kind
            index = int(payload.get('index'))
        except (TypeError, ValueError):
            return
        self._shift(kind, index)

    def on_reset_request(self, sender, **payload):
        self.reset()
