BOARD_SIZE = 4
TOTAL_TILES = BOARD_SIZE * BOARD_SIZE

# Identity carried by the Classic-mode placeholder tile.
EMPTY_TILE_ID = -1

# Rotate mode: top-left cell (x, y) of each 2x2 sub-board, indexed 0..4.
# Front ends read this table too, so button placement and engine agree.
SUB_BOARD_SIZE = 2
SUB_BOARD_ANCHORS = (
    (0, 0),  # top-left
    (0, 2),  # bottom-left
    (2, 0),  # top-right
    (2, 2),  # bottom-right
    (1, 1),  # center
)

# Inclusive ranges for the number of random primitives applied by a shuffle.
ROTATE_SHUFFLE_MIN = 50
ROTATE_SHUFFLE_MAX = 100
SHIFT_SHUFFLE_MIN = 30
SHIFT_SHUFFLE_MAX = 50

# Exponential decay toward target; keep ANIMATION_SPEED * dt below 1.
ANIMATION_SPEED = 8.0
# Both axes closer than this (in render units) snaps the tile onto its target.
SNAP_THRESHOLD = 1.0

VIRTUAL_WIDTH = 800
VIRTUAL_HEIGHT = 600
BOARD_PADDING = 50
# Vertical space kept free for the button bar above the board.
UI_RESERVE_HEIGHT = 80
BOARD_OFFSET_Y = 20
MIN_TILE_SIZE = 20
