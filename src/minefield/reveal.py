"""
Reveal engine for Minesweeper.

Discloses cells, counts adjacent mines and cascades through empty
regions. Detonation is reported to the caller, which owns the game
state.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from .effects import EffectDescriptor, EffectEmitter
from .grid import Grid


# ============================================================================
# Outcome Types
# ============================================================================

class RevealResult(Enum):
    """Possible results of a reveal action."""

    NO_OP = auto()
    DETONATED = auto()
    REVEALED = auto()


@dataclass
class RevealOutcome:
    """
    Result of revealing a cell.

    Attributes:
        result: What the reveal did.
        effects: Particle requests emitted by the action.
    """

    result: RevealResult
    effects: List[EffectDescriptor] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return self.result == RevealResult.NO_OP

    @property
    def detonated(self) -> bool:
        return self.result == RevealResult.DETONATED


# ============================================================================
# Neighbor Counting (Low-level)
# ============================================================================

def count_adjacent_mines(grid: Grid, col: int, row: int) -> int:
    """
    Count mines among the 8 neighbors of a cell.

    Cells outside the grid are not counted, nor is the cell itself.
    """
    grid.check_bounds(col, row)
    top = max(row - 1, 0)
    left = max(col - 1, 0)
    block = grid.mine[top:row + 2, left:col + 2]
    return int(block.sum()) - int(grid.mine[row, col])


def _disclose(
    grid: Grid, col: int, row: int, emitter: EffectEmitter
) -> List[EffectDescriptor]:
    """Reveal one non-mine cell and emit its burst."""
    grid.set_flag(col, row, False)
    grid.set_value(col, row, count_adjacent_mines(grid, col, row))
    return emitter.reveal(col, row)


# ============================================================================
# Reveal (High-level)
# ============================================================================

def reveal(
    grid: Grid, col: int, row: int, emitter: EffectEmitter
) -> RevealOutcome:
    """
    Reveal a cell.

    Flagged and already revealed cells are left alone. Revealing a mine
    detonates every mine on the board. Revealing a cell with no
    adjacent mines cascades to its unrevealed neighbors.

    Args:
        grid: Board to mutate.
        col: Column index.
        row: Row index.
        emitter: Source of particle descriptors.

    Returns:
        Outcome with the emitted effects.
    """
    grid.check_bounds(col, row)

    if grid.is_flagged(col, row):
        return RevealOutcome(RevealResult.NO_OP)

    if grid.is_mine(col, row):
        effects = emitter.detonation(grid.mine_cells())
        return RevealOutcome(RevealResult.DETONATED, effects)

    if grid.is_revealed(col, row):
        return RevealOutcome(RevealResult.NO_OP)

    return RevealOutcome(
        RevealResult.REVEALED, _flood_fill(grid, col, row, emitter)
    )


def _flood_fill(
    grid: Grid, col: int, row: int, emitter: EffectEmitter
) -> List[EffectDescriptor]:
    """
    Reveal a cell and the empty region around it.

    Depth-first with an explicit stack of neighbor iterators, so cells
    are disclosed in the same order a recursive walk would use.
    """
    effects = _disclose(grid, col, row, emitter)
    if grid.value_at(col, row) != 0:
        return effects

    pending = [iter(grid.neighbors(col, row))]
    while pending:
        for next_col, next_row in pending[-1]:
            if grid.is_revealed(next_col, next_row):
                continue
            effects.extend(_disclose(grid, next_col, next_row, emitter))
            if grid.value_at(next_col, next_row) == 0:
                pending.append(iter(grid.neighbors(next_col, next_row)))
            break
        else:
            pending.pop()
    return effects
