"""
Grid module for Minesweeper.

Holds the square board as three parallel numpy matrices: revealed
values, mine placement and flags. Matrices are indexed [row, col];
every public accessor takes (col, row).
"""
from typing import Iterator, List, Tuple

import numpy as np


# ============================================================================
# Constants
# ============================================================================

UNREVEALED = -1

# (d_row, d_col) pairs, row-major; includes the centre cell.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Square Minesweeper grid.

    Attributes:
        size: Number of rows and columns.
        cell_value: int8 matrix, UNREVEALED or an adjacent-mine count.
        mine: bool matrix of mine positions, fixed after generation.
        flag: bool matrix of player flags.
    """

    def __init__(self, size: int) -> None:
        """
        Create an empty grid with every cell unrevealed.

        Args:
            size: Side length of the grid.
        """
        if size < 1:
            raise ValueError("Grid size must be positive")
        self.size = size
        self.cell_value = np.full((size, size), UNREVEALED, dtype=np.int8)
        self.mine = np.zeros((size, size), dtype=bool)
        self.flag = np.zeros((size, size), dtype=bool)

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, mines={self.mine_total})"

    # ========================================================================
    # Bounds (Low-level)
    # ========================================================================

    def in_bounds(self, col: int, row: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= col < self.size and 0 <= row < self.size

    def check_bounds(self, col: int, row: int) -> None:
        """Raise IndexError for coordinates outside the grid."""
        if not self.in_bounds(col, row):
            raise IndexError(
                f"Cell ({col}, {row}) outside {self.size}x{self.size} grid"
            )

    def neighbors(self, col: int, row: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds neighbor positions, centre cell included.

        Args:
            col: Column index of centre cell.
            row: Row index of centre cell.

        Returns:
            List of (col, row) tuples in row-major offset order.
        """
        result = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_col = col + delta_col
            new_row = row + delta_row
            if self.in_bounds(new_col, new_row):
                result.append((new_col, new_row))
        return result

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate over every (col, row) in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield col, row

    # ========================================================================
    # Cell Accessors (Mid-level)
    # ========================================================================

    def value_at(self, col: int, row: int) -> int:
        """Get revealed value, or UNREVEALED."""
        self.check_bounds(col, row)
        return int(self.cell_value[row, col])

    def is_revealed(self, col: int, row: int) -> bool:
        return self.value_at(col, row) != UNREVEALED

    def is_mine(self, col: int, row: int) -> bool:
        self.check_bounds(col, row)
        return bool(self.mine[row, col])

    def is_flagged(self, col: int, row: int) -> bool:
        self.check_bounds(col, row)
        return bool(self.flag[row, col])

    def set_value(self, col: int, row: int, value: int) -> None:
        """Store a revealed adjacent-mine count."""
        self.check_bounds(col, row)
        self.cell_value[row, col] = value

    def set_flag(self, col: int, row: int, flagged: bool) -> None:
        self.check_bounds(col, row)
        self.flag[row, col] = flagged

    def place_mine(self, col: int, row: int) -> bool:
        """
        Put a mine on a cell.

        Returns:
            True if placed, False if the cell already held a mine.
        """
        self.check_bounds(col, row)
        if self.mine[row, col]:
            return False
        self.mine[row, col] = True
        return True

    # ========================================================================
    # Aggregates (High-level)
    # ========================================================================

    @property
    def mine_total(self) -> int:
        return int(np.count_nonzero(self.mine))

    @property
    def flag_total(self) -> int:
        return int(np.count_nonzero(self.flag))

    @property
    def revealed_total(self) -> int:
        return int(np.count_nonzero(self.cell_value != UNREVEALED))

    def mine_cells(self) -> List[Tuple[int, int]]:
        """Get (col, row) of every mine in row-major order."""
        rows, cols = np.nonzero(self.mine)
        return [(int(col), int(row)) for row, col in zip(rows, cols)]
