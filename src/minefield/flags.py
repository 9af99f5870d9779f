"""
Flag manager for Minesweeper.

Toggles flags on unrevealed cells and checks the win condition after
every toggle.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

import numpy as np

from .effects import EffectDescriptor, EffectEmitter
from .grid import Grid


# ============================================================================
# Outcome Types
# ============================================================================

class FlagResult(Enum):
    """Possible results of a flag action."""

    NO_OP = auto()
    TOGGLED = auto()


@dataclass
class FlagOutcome:
    """
    Result of toggling a flag.

    Attributes:
        result: What the toggle did.
        won: Whether flags now mark exactly the mines.
        effects: Particle requests emitted by the action.
    """

    result: FlagResult
    won: bool = False
    effects: List[EffectDescriptor] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return self.result == FlagResult.NO_OP


# ============================================================================
# Flag Actions
# ============================================================================

def check_win(grid: Grid) -> bool:
    """
    Check if flags mark every mine and nothing else.

    Scans the full grid on each call.
    """
    return bool(np.array_equal(grid.flag, grid.mine))


def toggle_flag(
    grid: Grid, col: int, row: int, emitter: EffectEmitter
) -> FlagOutcome:
    """
    Toggle the flag on an unrevealed cell.

    Args:
        grid: Board to mutate.
        col: Column index.
        row: Row index.
        emitter: Source of particle descriptors.

    Returns:
        NO_OP for a revealed cell, otherwise TOGGLED with the win check.
    """
    grid.check_bounds(col, row)
    if grid.is_revealed(col, row):
        return FlagOutcome(FlagResult.NO_OP)

    grid.set_flag(col, row, not grid.is_flagged(col, row))
    effects = emitter.flag(col, row)
    return FlagOutcome(FlagResult.TOGGLED, check_win(grid), effects)
