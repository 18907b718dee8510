import dataclasses
import logging

import pytest

from tileshift.components.puzzle_mode import PuzzleMode
from tileshift.components.puzzle_tile import PuzzleTile
from tileshift.constants import EMPTY_TILE_ID
from tileshift.events.bus import EVENT_PUZZLE_SOLVED, EVENT_TILE_MOVED
from tileshift.systems.grid_ops import inversion_count, tiles_in_order
from tileshift.systems.variants.classic import permutation_is_solvable
from tests.helpers import assert_bijection, cell_map, make_board_system, solved_board_system


def test_solved_board_layout_and_win():
    _, _, system = solved_board_system(PuzzleMode.CLASSIC)
    assert system.is_won()
    assert system.empty_position == (3, 3)
    empty = system.get_tile(3, 3)
    assert empty.is_empty and empty.tile_id == EMPTY_TILE_ID
    assert system.get_tile(0, 0).tile_id == 0
    assert system.get_tile(2, 3).tile_id == 14
    assert sum(1 for tile_id in cell_map(system).values() if tile_id != EMPTY_TILE_ID) == 15


def test_adjacent_move_then_repeat_is_illegal():
    bus, _, system = solved_board_system(PuzzleMode.CLASSIC)
    moves = []
    bus.subscribe(EVENT_TILE_MOVED, lambda sender, **payload: moves.append(payload))

    assert system.move_tile(2, 3)
    assert system.empty_position == (2, 3)
    assert system.get_tile(3, 3).tile_id == 14
    assert system.get_tile(2, 3).is_empty
    assert not system.is_won()
    assert moves == [{"tile_id": 14, "src": (2, 3), "dst": (3, 3)}]

    before = cell_map(system)
    assert not system.move_tile(2, 3)
    assert cell_map(system) == before


def test_sliding_back_solves_and_announces():
    bus, _, system = solved_board_system(PuzzleMode.CLASSIC)
    solved = []
    bus.subscribe(EVENT_PUZZLE_SOLVED, lambda sender, **payload: solved.append(payload["mode"]))

    assert system.move_tile(3, 2)
    assert not system.is_won()
    assert system.move_tile(3, 3)
    assert system.is_won()
    assert solved == [PuzzleMode.CLASSIC]


@pytest.mark.parametrize("x,y", [(-1, 0), (4, 0), (0, 4), (0, -1), (0, 0), (2, 2), (1, 3), (3, 3)])
def test_illegal_moves_leave_grid_untouched(x, y):
    _, _, system = solved_board_system(PuzzleMode.CLASSIC)
    before = cell_map(system)
    assert not system.move_tile(x, y)
    assert cell_map(system) == before
    assert system.empty_position == (3, 3)
    assert system.is_won()


def test_move_resets_render_state_of_empty_slot():
    _, _, system = solved_board_system(PuzzleMode.CLASSIC)
    system.get_motion(3, 3).snap_to(42.0, 17.0)
    assert system.move_tile(3, 2)
    empty_motion = system.get_motion(3, 2)
    assert empty_motion.render_position == (0.0, 0.0)
    assert not empty_motion.animating


@pytest.mark.parametrize("seed", range(40))
def test_shuffle_produces_solvable_parity(seed):
    _, world, system = make_board_system(PuzzleMode.CLASSIC, seed=seed)
    system.initialize_board()
    board = system.board
    tiles = tiles_in_order(world, board, include_empty=False)
    assert board.empty_y == 3
    assert (inversion_count(tiles) + (4 - board.empty_y)) % 2 == 1
    assert system.is_solvable()
    assert_bijection(system)


def test_legal_moves_preserve_bijection_and_solvability():
    _, world, system = make_board_system(PuzzleMode.CLASSIC, seed=7)
    system.initialize_board()
    rng = world.random
    for _ in range(200):
        ex, ey = system.empty_position
        neighbours = [(ex + dx, ey + dy) for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1))]
        x, y = rng.choice(neighbours)
        in_range = 0 <= x < 4 and 0 <= y < 4
        assert system.move_tile(x, y) == in_range
        assert_bijection(system)
    assert system.is_solvable()


def test_reset_keeps_empty_cell_in_place():
    _, world, system = solved_board_system(PuzzleMode.CLASSIC)
    assert system.move_tile(3, 2)
    system.reset()
    board = system.board
    assert system.empty_position == (3, 2)
    assert system.get_tile(3, 2).is_empty
    tiles = tiles_in_order(world, board, include_empty=False)
    assert (inversion_count(tiles) + (4 - board.empty_y)) % 2 == 1
    assert_bijection(system)


def test_seeded_shuffles_are_reproducible():
    _, _, first = make_board_system(PuzzleMode.CLASSIC, seed=99)
    _, _, second = make_board_system(PuzzleMode.CLASSIC, seed=99)
    first.initialize_board()
    second.initialize_board()
    assert cell_map(first) == cell_map(second)


def test_artwork_comes_from_cell_source():
    _, _, system = make_board_system(PuzzleMode.CLASSIC)
    system.initialize_board(list("ABCDEFGHIJKLMNOP"), shuffle=False)
    assert system.get_tile(1, 0).artwork == "B"
    assert system.get_tile(2, 3).artwork == "O"
    assert system.get_tile(3, 3).artwork is None


def test_cell_source_of_wrong_length_is_rejected():
    _, _, system = make_board_system(PuzzleMode.CLASSIC)
    with pytest.raises(ValueError):
        system.initialize_board(list(range(15)))
    assert system.board is None


def test_inversion_parity_rule():
    def tile(rank):
        return PuzzleTile(tile_id=rank, solved_x=rank % 4, solved_y=rank // 4, current_x=0, current_y=0)

    ordered = [tile(rank) for rank in range(15)]
    assert inversion_count(ordered) == 0
    assert permutation_is_solvable(ordered, empty_y=3, size=4)

    # The classic unsolvable 14-15 swap.
    swapped = ordered[:13] + [ordered[14], ordered[13]]
    assert inversion_count(swapped) == 1
    assert not permutation_is_solvable(swapped, empty_y=3, size=4)
    # Moving the empty cell up one row flips the parity requirement.
    assert permutation_is_solvable(swapped, empty_y=2, size=4)


def test_shuffle_checks_solvability_only_for_debug_logging(caplog):
    _, _, system = make_board_system(PuzzleMode.CLASSIC)
    system.initialize_board()
    calls = []
    check = system.rules.is_solvable

    def counting_check(world, board):
        calls.append(1)
        return check(world, board)

    system.rules = dataclasses.replace(system.rules, is_solvable=counting_check)
    caplog.set_level(logging.INFO, logger="tileshift.systems.puzzle_board")
    system.reset()
    assert calls == []
    caplog.set_level(logging.DEBUG, logger="tileshift.systems.puzzle_board")
    system.reset()
    assert calls == [1]
    assert "solvable=True" in caplog.text
