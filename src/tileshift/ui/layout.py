from tileshift.components.board_layout import BoardLayout
from tileshift.constants import (
    BOARD_OFFSET_Y,
    BOARD_PADDING,
    BOARD_SIZE,
    MIN_TILE_SIZE,
    SUB_BOARD_ANCHORS,
    SUB_BOARD_SIZE,
    UI_RESERVE_HEIGHT,
)

def compute_board_geometry(window_width: float, window_height: float):
    """Return (tile_size, start_x, start_y) for the largest square board that fits.

    Padding surrounds the board on every side and the button bar reserves extra
    height; the board is centered and sits slightly below the middle.
    """
    available_w = window_width - 2 * BOARD_PADDING
    available_h = window_height - 2 * BOARD_PADDING - UI_RESERVE_HEIGHT
    tile_size = min(available_w, available_h) / BOARD_SIZE
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    board_size = tile_size * BOARD_SIZE
    start_x = (window_width - board_size) / 2
    start_y = (window_height - board_size) / 2 - BOARD_OFFSET_Y
    return tile_size, start_x, start_y


def layout_for_window(window_width: float, window_height: float) -> BoardLayout:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height)
    return BoardLayout(tile_size=tile_size, start_x=start_x, start_y=start_y)


def cell_to_point(layout: BoardLayout, x: int, y: int):
    """Bottom-left corner of cell (x, y); grid row 0 is drawn at the top."""
    px = layout.start_x + x * layout.tile_size
    py = layout.start_y + (BOARD_SIZE - 1 - y) * layout.tile_size
    return px, py


def point_to_cell(layout: BoardLayout, px: float, py: float):
    """Grid cell under a window point, or None outside the board."""
    extent = layout.tile_size * BOARD_SIZE
    if not (layout.start_x <= px < layout.start_x + extent):
        return None
    if not (layout.start_y <= py < layout.start_y + extent):
        return None
    x = min(int((px - layout.start_x) // layout.tile_size), BOARD_SIZE - 1)
    row_from_bottom = min(int((py - layout.start_y) // layout.tile_size), BOARD_SIZE - 1)
    return x, BOARD_SIZE - 1 - row_from_bottom


def sub_board_center(layout: BoardLayout, index: int):
    """Window point where the four cells of sub-board ``index`` meet."""
    ax, ay = SUB_BOARD_ANCHORS[index]
    # Bottom-left corner of the block's top-right cell.
    return cell_to_point(layout, ax + SUB_BOARD_SIZE - 1, ay + SUB_BOARD_SIZE // 2 - 1)
