"""Rotate rules: five overlapping 2x2 sub-boards turn clockwise."""
from __future__ import annotations

import logging
import random
from typing import List

from esper import World

from tileshift.components.board import Board
from tileshift.constants import (
    ROTATE_SHUFFLE_MAX,
    ROTATE_SHUFFLE_MIN,
    SUB_BOARD_ANCHORS,
    SUB_BOARD_SIZE,
)
from tileshift.systems.grid_ops import Position, cycle_cells

logger = logging.getLogger(__name__)


def sub_board_loop(index: int) -> List[Position]:
    """Cells of a sub-board in clockwise order: TL, TR, BR, BL."""
    x, y = SUB_BOARD_ANCHORS[index]
    return [(x, y), (x + 1, y), (x + 1, y + 1), (x, y + 1)]


def sub_board_at(x: int, y: int) -> int | None:
    """First sub-board (in index order) whose footprint contains (x, y)."""
    for index, (start_x, start_y) in enumerate(SUB_BOARD_ANCHORS):
        if start_x <= x < start_x + SUB_BOARD_SIZE and start_y <= y < start_y + SUB_BOARD_SIZE:
            return index
    return None


def rotate_sub_board(world: World, board: Board, index: int) -> bool:
    if index < 0 or index >= len(SUB_BOARD_ANCHORS):
        return False
    cycle_cells(world, board, sub_board_loop(index))
    return True


def is_solvable(world: World, board: Board) -> bool:
    # Shuffles only compose rotations, each of which can be undone.
    return True


def shuffle(world: World, board: Board, rng: random.Random) -> int:
    steps = rng.randint(ROTATE_SHUFFLE_MIN, ROTATE_SHUFFLE_MAX)
    for _ in range(steps):
        rotate_sub_board(world, board, rng.randrange(len(SUB_BOARD_ANCHORS)))
    logger.debug("rotate shuffle applied %d rotation(s)", steps)
    return steps
