"""Classic sliding rules: one empty cell, adjacent tiles slide into it."""
from __future__ import annotations

import logging
import random
from typing import Sequence

from esper import World

from tileshift.components.board import Board
from tileshift.components.puzzle_tile import PuzzleTile
from tileshift.components.tile_motion import TileMotion
from tileshift.systems.grid_ops import entity_at, inversion_count, place_tile, tiles_in_order

logger = logging.getLogger(__name__)


def is_adjacent_to_empty(board: Board, x: int, y: int) -> bool:
    dx = abs(x - board.empty_x)
    dy = abs(y - board.empty_y)
    return (dx == 1 and dy == 0) or (dx == 0 and dy == 1)


def slide_tile(world: World, board: Board, x: int, y: int) -> bool:
    """Swap the tile at (x, y) with the empty cell when they are adjacent."""
    entity = entity_at(board, x, y)
    if entity is None:
        return False
    tile: PuzzleTile = world.component_for_entity(entity, PuzzleTile)
    if tile.is_empty:
        return False
    if not is_adjacent_to_empty(board, x, y):
        return False
    empty_entity = entity_at(board, board.empty_x, board.empty_y)
    place_tile(world, board, entity, board.empty_x, board.empty_y)
    place_tile(world, board, empty_entity, x, y)
    # The vacated slot starts over with fresh render state.
    world.component_for_entity(empty_entity, TileMotion).reset()
    board.empty_x, board.empty_y = x, y
    return True


def permutation_is_solvable(tiles: Sequence[PuzzleTile], empty_y: int, size: int) -> bool:
    """15-puzzle parity on an even-width board.

    ``tiles`` are the non-empty tiles in row-major reading order.
    """
    empty_row_from_bottom = size - empty_y
    return (inversion_count(tiles) + empty_row_from_bottom) % 2 == 1


def is_solvable(world: World, board: Board) -> bool:
    tiles = tiles_in_order(world, board, include_empty=False)
    return permutation_is_solvable(tiles, board.empty_y, board.size)


def shuffle(world: World, board: Board, rng: random.Random) -> int:
    """Permute the non-empty tiles until solvable; the empty cell stays put.

    Returns the number of permutations drawn.
    """
    entities = [
        entity for entity in board.cells
        if not world.component_for_entity(entity, PuzzleTile).is_empty
    ]
    attempts = 0
    while True:
        rng.shuffle(entities)
        attempts += 1
        tiles = [world.component_for_entity(entity, PuzzleTile) for entity in entities]
        if permutation_is_solvable(tiles, board.empty_y, board.size):
            break
    remaining = iter(entities)
    for y in range(board.size):
        for x in range(board.size):
            if x == board.empty_x and y == board.empty_y:
                continue
            place_tile(world, board, next(remaining), x, y)
    logger.debug("classic shuffle settled after %d permutation(s)", attempts)
    return attempts
