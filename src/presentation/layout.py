"""
Board layout for the Minesweeper shell.

Maps cells to screen positions around a camera centred on the board,
and pointer positions back to cells.
"""
import math
from dataclasses import dataclass
from typing import Tuple

from minefield.effects import CELL_ANCHOR


# ============================================================================
# Constants
# ============================================================================

WINDOW_WIDTH = 800.0
WINDOW_HEIGHT = 600.0
TILE_GAP = 2.0


# ============================================================================
# Board Layout
# ============================================================================

@dataclass(frozen=True)
class BoardLayout:
    """
    Geometry of a square board centred on the origin.

    Attributes:
        size: Number of rows and columns.
        window_height: Height the board is fitted into.
    """

    size: int
    window_height: float = WINDOW_HEIGHT

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Board size must be positive")

    @property
    def tile_size(self) -> float:
        return self.window_height / self.size - TILE_GAP

    @property
    def half_board_width(self) -> float:
        return self.tile_size * self.size * 0.5

    def effect_position(self, col: int, row: int) -> Tuple[float, float]:
        """Where particles for a cell spawn."""
        return (
            -self.half_board_width + (col + CELL_ANCHOR) * self.tile_size,
            -self.half_board_width + (row + CELL_ANCHOR) * self.tile_size,
        )

    def cell_at(self, x: float, y: float) -> Tuple[int, int]:
        """
        Cell under a pointer position, clamped to the board.

        Args:
            x: Pointer x in board space.
            y: Pointer y in board space.

        Returns:
            (col, row) inside the board.
        """
        col = math.floor((self.half_board_width + x) / self.tile_size)
        row = math.floor((self.half_board_width + y) / self.tile_size)
        return self._clamp(col), self._clamp(row)

    def _clamp(self, index: int) -> int:
        return min(max(index, 0), self.size - 1)
