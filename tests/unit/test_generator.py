"""
Unit tests for board generation.

Tests mine counts, configuration validation and seeded determinism.
"""
import pytest
import numpy as np
from minefield import (
    BoardConfig,
    DIFFICULTIES,
    EASY,
    HARD,
    MEDIUM,
    UNREVEALED,
    generate,
    mine_count,
)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, easy_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert easy_config.size == 8
        assert easy_config.mine_density == pytest.approx(0.182)

    def test_zero_size_raises_error(self) -> None:
        """Size of 0 should raise ValueError."""
        with pytest.raises(ValueError, match="size must be positive"):
            BoardConfig(0)

    @pytest.mark.parametrize("density", [-0.1, 1.0, 1.5])
    def test_bad_density_raises_error(self, density: float) -> None:
        """Density outside [0, 1) should raise ValueError."""
        with pytest.raises(ValueError, match="density"):
            BoardConfig(8, density)

    def test_presets(self) -> None:
        """Difficulty presets are 8, 16 and 24 cells wide."""
        assert (EASY.size, MEDIUM.size, HARD.size) == (8, 16, 24)
        assert DIFFICULTIES["medium"] is MEDIUM


# ============================================================================
# Mine Count Tests
# ============================================================================

class TestMineCount:
    """Test the fixed mine density."""

    @pytest.mark.parametrize(
        "size,expected", [(1, 0), (2, 1), (8, 12), (16, 47), (24, 105)]
    )
    def test_mine_count_rounds_density(
        self, size: int, expected: int
    ) -> None:
        """Mine count is round(size^2 * 0.182)."""
        assert mine_count(size) == expected

    @pytest.mark.parametrize("size", [1, 2, 8, 16, 24])
    def test_generated_grid_has_exact_mine_count(self, size: int) -> None:
        """Generated grids hold exactly mine_count distinct mines."""
        for seed in range(5):
            grid = generate(size, rng=seed)
            assert grid.mine_total == mine_count(size)


# ============================================================================
# Generation Tests
# ============================================================================

class TestGenerate:
    """Test the state of freshly generated boards."""

    def test_generated_grid_is_unrevealed_and_unflagged(self) -> None:
        grid = generate(16, rng=3)
        assert np.all(grid.cell_value == UNREVEALED)
        assert grid.flag_total == 0

    def test_same_seed_same_board(self) -> None:
        """Seeded generation is deterministic."""
        first = generate(16, rng=42)
        second = generate(16, rng=42)
        assert np.array_equal(first.mine, second.mine)

    def test_accepts_generator_instance(self) -> None:
        """An explicit numpy Generator can be injected."""
        rng = np.random.default_rng(7)
        grid = generate(8, rng=rng)
        assert grid.size == 8

    def test_each_call_builds_a_new_grid(self) -> None:
        first = generate(8, rng=1)
        second = generate(8, rng=1)
        assert first is not second

    def test_invalid_size_raises_error(self) -> None:
        with pytest.raises(ValueError):
            generate(0)
