from esper import World

from tileshift.components.board import Board
from tileshift.components.board_layout import BoardLayout
from tileshift.components.puzzle_tile import PuzzleTile
from tileshift.components.tile_motion import TileMotion
from tileshift.constants import ANIMATION_SPEED, SNAP_THRESHOLD
from tileshift.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_INITIALIZED,
    EVENT_BOARD_SHUFFLED,
    EVENT_LAYOUT_CHANGED,
    EVENT_TICK,
    EventBus,
)
from tileshift.ui.layout import cell_to_point


def step_motion(motion: TileMotion, dt: float, speed: float = ANIMATION_SPEED,
                threshold: float = SNAP_THRESHOLD) -> None:
    """Advance one tile toward its target by exponential decay."""
    if not motion.animating:
        return
    dx = motion.target_x - motion.render_x
    dy = motion.target_y - motion.render_y
    if abs(dx) < threshold and abs(dy) < threshold:
        motion.render_x = motion.target_x
        motion.render_y = motion.target_y
        motion.animating = False
    else:
        motion.render_x += dx * speed * dt
        motion.render_y += dy * speed * dt


def step_all(world: World, dt: float) -> None:
    for _, motion in world.get_component(TileMotion):
        step_motion(motion, dt)


def any_animating(world: World) -> bool:
    for _, motion in world.get_component(TileMotion):
        if motion.animating:
            return True
    return False


def get_layout(world: World) -> BoardLayout | None:
    for _, layout in world.get_component(BoardLayout):
        return layout
    return None


class AnimationSystem:
    """Steps tile motions each tick and retargets them when the board changes."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._was_animating = False
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        event_bus.subscribe(EVENT_BOARD_INITIALIZED, self.on_board_shuffled)
        event_bus.subscribe(EVENT_BOARD_SHUFFLED, self.on_board_shuffled)
        event_bus.subscribe(EVENT_LAYOUT_CHANGED, self.on_layout_changed)

    def update(self, dt: float) -> None:
        step_all(self.world, dt)
        animating = any_animating(self.world)
        if self._was_animating and not animating:
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='tiles')
        self._was_animating = animating

    def is_animating(self) -> bool:
        return any_animating(self.world)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        self.update(dt)

    def on_board_changed(self, sender, **kwargs):
        self.sync_to_layout(animate=True)

    def on_board_shuffled(self, sender, **kwargs):
        self.sync_to_layout(animate=False)

    def on_layout_changed(self, sender, **kwargs):
        self.sync_to_layout(animate=False)

    def sync_to_layout(self, animate: bool) -> None:
        """Point every tile's motion at its current cell; no-op without a layout."""
        layout = get_layout(self.world)
        if layout is None:
            return
        for _, board in self.world.get_component(Board):
            for entity in board.cells:
                tile: PuzzleTile = self.world.component_for_entity(entity, PuzzleTile)
                motion: TileMotion = self.world.component_for_entity(entity, TileMotion)
                px, py = cell_to_point(layout, tile.current_x, tile.current_y)
                # The empty cell is never drawn, so it jumps straight to its slot.
                if animate and not tile.is_empty:
                    motion.animate_to(px, py)
                else:
                    motion.snap_to(px, py)
        self._was_animating = any_animating(self.world)
