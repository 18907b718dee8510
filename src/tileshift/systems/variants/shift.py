"""Shift rules: whole rows and columns rotate by one cell with wraparound."""
from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List

from esper import World

from tileshift.components.board import Board
from tileshift.constants import SHIFT_SHUFFLE_MAX, SHIFT_SHUFFLE_MIN
from tileshift.systems.grid_ops import Position, cycle_cells

logger = logging.getLogger(__name__)


class ShiftKind(Enum):
    UP = "up"        # column, top tile wraps to the bottom
    DOWN = "down"    # column, bottom tile wraps to the top
    LEFT = "left"    # row, leftmost tile wraps to the right
    RIGHT = "right"  # row, rightmost tile wraps to the left


def line_loop(board: Board, kind: ShiftKind, index: int) -> List[Position]:
    """Cells ordered so the tile at loop[i] moves to loop[i + 1]."""
    last = board.size - 1
    if kind is ShiftKind.UP:
        return [(index, y) for y in range(last, -1, -1)]
    if kind is ShiftKind.DOWN:
        return [(index, y) for y in range(board.size)]
    if kind is ShiftKind.LEFT:
        return [(x, index) for x in range(last, -1, -1)]
    return [(x, index) for x in range(board.size)]


def shift_line(world: World, board: Board, kind: ShiftKind, index: int) -> bool:
    if index < 0 or index >= board.size:
        return False
    cycle_cells(world, board, line_loop(board, kind, index))
    return True


def is_solvable(world: World, board: Board) -> bool:
    # Shuffles only compose cyclic shifts, each of which can be undone.
    return True


def shuffle(world: World, board: Board, rng: random.Random) -> int:
    kinds = list(ShiftKind)
    steps = rng.randint(SHIFT_SHUFFLE_MIN, SHIFT_SHUFFLE_MAX)
    for _ in range(steps):
        kind = kinds[rng.randrange(len(kinds))]
        shift_line(world, board, kind, rng.randrange(board.size))
    logger.debug("shift shuffle applied %d shift(s)", steps)
    return steps
