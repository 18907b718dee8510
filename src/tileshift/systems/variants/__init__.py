from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict

from esper import World

from tileshift.components.board import Board
from tileshift.components.puzzle_mode import PuzzleMode
from tileshift.systems.variants import classic, rotate, shift
from tileshift.systems.variants.shift import ShiftKind


def _slide_disabled(world: World, board: Board, x: int, y: int) -> bool:
    return False


@dataclass(frozen=True, slots=True)
class VariantRules:
    """Operation set shared by every variant.

    primary_move slides the tile at (x, y); only Classic has an empty cell to
    slide into, the other variants refuse it.
    """
    mode: PuzzleMode
    shuffle: Callable[[World, Board, random.Random], int]
    primary_move: Callable[[World, Board, int, int], bool]
    is_solvable: Callable[[World, Board], bool]


VARIANT_RULES: Dict[PuzzleMode, VariantRules] = {
    PuzzleMode.CLASSIC: VariantRules(
        mode=PuzzleMode.CLASSIC,
        shuffle=classic.shuffle,
        primary_move=classic.slide_tile,
        is_solvable=classic.is_solvable,
    ),
    PuzzleMode.ROTATE: VariantRules(
        mode=PuzzleMode.ROTATE,
        shuffle=rotate.shuffle,
        primary_move=_slide_disabled,
        is_solvable=rotate.is_solvable,
    ),
    PuzzleMode.SHIFT: VariantRules(
        mode=PuzzleMode.SHIFT,
        shuffle=shift.shuffle,
        primary_move=_slide_disabled,
        is_solvable=shift.is_solvable,
    ),
}


def rules_for(mode: PuzzleMode) -> VariantRules:
    return VARIANT_RULES[mode]


__all__ = [
    "ShiftKind",
    "VARIANT_RULES",
    "VariantRules",
    "rules_for",
]
