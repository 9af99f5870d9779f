"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    BoardConfig,
    EffectEmitter,
    GameSession,
    Grid,
    grid_from_mines,
)


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def empty_grid() -> Grid:
    """Create a 5x5 grid with no mines for cascade testing."""
    return Grid(5)


@pytest.fixture
def wall_grid() -> Grid:
    """Create a 5x5 grid with a full column of mines at col 2."""
    return grid_from_mines(5, [(2, row) for row in range(5)])


@pytest.fixture
def corner_grid() -> Grid:
    """Create a 6x6 grid where corner (0, 0) touches two mines."""
    return grid_from_mines(6, [(1, 0), (1, 1)])


@pytest.fixture
def diagonal_grid() -> Grid:
    """Create a 2x2 grid with mines at (0, 0) and (1, 1)."""
    return grid_from_mines(2, [(0, 0), (1, 1)])


# ============================================================================
# Emitter Fixtures
# ============================================================================

@pytest.fixture
def emitter() -> EffectEmitter:
    """Seeded emitter positioned in tile units."""
    return EffectEmitter(rng=0)


@pytest.fixture
def cell_emitter() -> EffectEmitter:
    """Seeded emitter whose effect positions are the raw (col, row)."""
    return EffectEmitter(rng=0, locate=lambda col, row: (col, row))


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def scripted_session() -> GameSession:
    """Session on a 6x6 board with mines at (3, 3) and (5, 0)."""
    return GameSession(grid=grid_from_mines(6, [(3, 3), (5, 0)]), rng=0)


@pytest.fixture
def easy_config() -> BoardConfig:
    """Easy difficulty configuration."""
    return BoardConfig(8)
