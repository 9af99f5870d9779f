"""
Board generation for Minesweeper.

Builds fresh grids with randomly placed mines at a fixed density and
defines the board configuration presets.
"""
import math
from dataclasses import dataclass
from typing import Dict, Union

import numpy as np

from .grid import Grid


# ============================================================================
# Constants
# ============================================================================

MINE_DENSITY = 0.182


def mine_count(size: int, density: float = MINE_DENSITY) -> int:
    """
    Number of mines on a size x size board.

    Rounds half away from zero.
    """
    return int(math.floor(size * size * density + 0.5))


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        mine_density: Fraction of cells holding a mine.
    """

    size: int = 8
    mine_density: float = MINE_DENSITY

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if not 0.0 <= self.mine_density < 1.0:
            raise ValueError("Mine density must be in [0, 1)")

    @property
    def num_mines(self) -> int:
        return mine_count(self.size, self.mine_density)


# Preset difficulty levels
EASY = BoardConfig(8)
MEDIUM = BoardConfig(16)
HARD = BoardConfig(24)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Generation
# ============================================================================

def generate(
    size: int,
    rng: Union[np.random.Generator, int, None] = None,
    density: float = MINE_DENSITY,
) -> Grid:
    """
    Create a new grid with mines placed uniformly at random.

    Draws (col, row) pairs and retries on duplicates until the target
    count is reached. The first click is not protected.

    Args:
        size: Side length of the board.
        rng: Random generator or seed.
        density: Fraction of cells holding a mine.

    Returns:
        Grid with every cell unrevealed and unflagged.
    """
    config = BoardConfig(size, density)
    rng = np.random.default_rng(rng)
    grid = Grid(config.size)

    placed = 0
    target = config.num_mines
    while placed < target:
        col = int(rng.integers(0, size))
        row = int(rng.integers(0, size))
        if grid.place_mine(col, row):
            placed += 1
    return grid


def generate_from_config(
    config: BoardConfig,
    rng: Union[np.random.Generator, int, None] = None,
) -> Grid:
    """Create a new grid from a board configuration."""
    return generate(config.size, rng, config.mine_density)


def grid_from_mines(size: int, mines) -> Grid:
    """
    Build a grid with mines at fixed (col, row) positions.

    Used for scripted boards and tests.
    """
    grid = Grid(size)
    for col, row in mines:
        grid.place_mine(col, row)
    return grid
