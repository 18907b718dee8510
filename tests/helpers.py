from __future__ import annotations

import random

from tileshift.components.puzzle_mode import PuzzleMode
from tileshift.components.puzzle_tile import PuzzleTile
from tileshift.constants import BOARD_SIZE
from tileshift.events.bus import EventBus
from tileshift.systems.grid_ops import occupied_cells
from tileshift.systems.puzzle_board import PuzzleBoardSystem
from tileshift.world import create_world

ALL_CELLS = sorted((x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE))


def make_board_system(mode: PuzzleMode, seed: int = 1234):
    """Fresh world, bus and board system seeded for reproducible shuffles."""
    bus = EventBus()
    world = create_world(rng=random.Random(seed))
    system = PuzzleBoardSystem(world, bus, mode)
    return bus, world, system


def solved_board_system(mode: PuzzleMode):
    bus, world, system = make_board_system(mode)
    system.initialize_board(shuffle=False)
    return bus, world, system


def cell_map(system: PuzzleBoardSystem) -> dict[tuple[int, int], int]:
    """Tile id found at every cell."""
    layout: dict[tuple[int, int], int] = {}
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            tile: PuzzleTile = system.get_tile(x, y)
            layout[(x, y)] = tile.tile_id
    return layout


def assert_bijection(system: PuzzleBoardSystem) -> None:
    board = system.board
    assert sorted(occupied_cells(system.world, board)) == ALL_CELLS
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            tile = system.get_tile(x, y)
            assert (tile.current_x, tile.current_y) == (x, y)
