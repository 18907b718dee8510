from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from esper import World

from tileshift.components.board import Board
from tileshift.components.puzzle_mode import PuzzleMode
from tileshift.components.puzzle_tile import PuzzleTile
from tileshift.components.tile_motion import TileMotion

Position = Tuple[int, int]


def get_board_entity(world: World) -> int | None:
    for entity, _ in world.get_component(Board):
        return entity
    return None


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None


def build_board(world: World, size: int, mode: PuzzleMode, artwork: Sequence) -> int:
    """Create a board entity plus one tile entity per cell, in solved order.

    ``artwork`` is indexed row-major. With an empty tile, the bottom-right
    cell gets the placeholder and its artwork entry is unused.
    """
    board = Board(size=size, mode=mode)
    tile_id = 0
    for y in range(size):
        for x in range(size):
            if mode.has_empty_tile and x == size - 1 and y == size - 1:
                tile = PuzzleTile.empty(x, y)
                board.empty_x, board.empty_y = x, y
            else:
                tile = PuzzleTile(
                    tile_id=tile_id,
                    solved_x=x,
                    solved_y=y,
                    current_x=x,
                    current_y=y,
                    artwork=artwork[board.index(x, y)],
                )
                tile_id += 1
            board.cells.append(world.create_entity(tile, TileMotion()))
    board.won = True
    return world.create_entity(board)


def destroy_board(world: World, board_entity: int) -> None:
    board: Board = world.component_for_entity(board_entity, Board)
    for entity in board.cells:
        world.delete_entity(entity, immediate=True)
    world.delete_entity(board_entity, immediate=True)


def entity_at(board: Board, x: int, y: int) -> int | None:
    if not board.in_bounds(x, y):
        return None
    return board.cells[board.index(x, y)]


def tile_at(world: World, board: Board, x: int, y: int) -> PuzzleTile | None:
    entity = entity_at(board, x, y)
    if entity is None:
        return None
    return world.component_for_entity(entity, PuzzleTile)


def motion_at(world: World, board: Board, x: int, y: int) -> TileMotion | None:
    entity = entity_at(board, x, y)
    if entity is None:
        return None
    return world.component_for_entity(entity, TileMotion)


def place_tile(world: World, board: Board, entity: int, x: int, y: int) -> None:
    board.cells[board.index(x, y)] = entity
    world.component_for_entity(entity, PuzzleTile).set_grid_position(x, y)


def cycle_cells(world: World, board: Board, loop: Sequence[Position]) -> None:
    """Move the tile at loop[i] to loop[i + 1]; the last tile wraps to loop[0]."""
    moving = [board.cells[board.index(x, y)] for x, y in loop]
    for offset, entity in enumerate(moving):
        x, y = loop[(offset + 1) % len(loop)]
        place_tile(world, board, entity, x, y)


def tiles_in_order(world: World, board: Board, *, include_empty: bool = True) -> List[PuzzleTile]:
    """Tiles in row-major cell order."""
    tiles: List[PuzzleTile] = []
    for entity in board.cells:
        tile: PuzzleTile = world.component_for_entity(entity, PuzzleTile)
        if tile.is_empty and not include_empty:
            continue
        tiles.append(tile)
    return tiles


def check_win(world: World, board: Board) -> bool:
    """True iff every tile, the empty one included, sits on its solved cell."""
    for entity in board.cells:
        tile: PuzzleTile = world.component_for_entity(entity, PuzzleTile)
        if not tile.in_solved_position:
            return False
    return True


def inversion_count(tiles: Iterable[PuzzleTile]) -> int:
    ranks = [tile.solved_rank for tile in tiles]
    inversions = 0
    for i in range(len(ranks) - 1):
        for j in range(i + 1, len(ranks)):
            if ranks[i] > ranks[j]:
                inversions += 1
    return inversions


def occupied_cells(world: World, board: Board) -> List[Position]:
    """Current coordinates reported by every tile on the board."""
    cells: List[Position] = []
    for entity in board.cells:
        tile: PuzzleTile = world.component_for_entity(entity, PuzzleTile)
        cells.append((tile.current_x, tile.current_y))
    return cells
