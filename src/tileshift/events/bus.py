from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float
EVENT_LAYOUT_CHANGED = "layout_changed"            # payload: tile_size=float, start_x=float, start_y=float


# ============================================================================
# COMMANDS (issued by a front end)
# ============================================================================
EVENT_TILE_CLICK = "tile_click"                    # payload: x=int, y=int (grid cell)
EVENT_ROTATE_REQUEST = "rotate_request"            # payload: index=int
EVENT_SHIFT_REQUEST = "shift_request"              # payload: kind=ShiftKind|str, index=int
EVENT_PUZZLE_RESET_REQUEST = "puzzle_reset_request"  # payload: None


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_BOARD_INITIALIZED = "board_initialized"      # payload: mode=PuzzleMode, shuffled=bool
EVENT_BOARD_SHUFFLED = "board_shuffled"            # payload: mode=PuzzleMode, reason=str
EVENT_TILE_MOVED = "tile_moved"                    # payload: tile_id=int, src=(x,y), dst=(x,y)
EVENT_SUB_BOARD_ROTATED = "sub_board_rotated"      # payload: index=int, anchor=(x,y)
EVENT_LINE_SHIFTED = "line_shifted"                # payload: kind=ShiftKind, index=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str
EVENT_PUZZLE_SOLVED = "puzzle_solved"              # payload: mode=PuzzleMode


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str
