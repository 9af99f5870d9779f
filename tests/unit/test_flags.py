"""
Unit tests for the flag manager.

Tests toggling, protection of revealed cells and the win condition.
"""
import pytest
from minefield import (
    EffectEmitter,
    FlagResult,
    Grid,
    check_win,
    reveal,
    toggle_flag,
)


# ============================================================================
# Toggle Tests
# ============================================================================

class TestToggleFlag:
    """Test flag toggling behavior."""

    def test_flag_unrevealed_cell(
        self, corner_grid: Grid, emitter: EffectEmitter
    ) -> None:
        outcome = toggle_flag(corner_grid, 4, 4, emitter)
        assert outcome.result == FlagResult.TOGGLED
        assert corner_grid.is_flagged(4, 4) is True

    def test_toggle_twice_unflags(
        self, corner_grid: Grid, emitter: EffectEmitter
    ) -> None:
        toggle_flag(corner_grid, 4, 4, emitter)
        outcome = toggle_flag(corner_grid, 4, 4, emitter)
        assert outcome.result == FlagResult.TOGGLED
        assert corner_grid.is_flagged(4, 4) is False

    def test_toggle_emits_two_effects(
        self, corner_grid: Grid, emitter: EffectEmitter
    ) -> None:
        outcome = toggle_flag(corner_grid, 4, 4, emitter)
        assert len(outcome.effects) == 2

    def test_flag_revealed_cell_is_noop(
        self, corner_grid: Grid, emitter: EffectEmitter
    ) -> None:
        """Cannot flag a revealed cell."""
        reveal(corner_grid, 0, 0, emitter)
        outcome = toggle_flag(corner_grid, 0, 0, emitter)
        assert outcome.is_noop is True
        assert outcome.effects == []
        assert corner_grid.is_flagged(0, 0) is False

    def test_out_of_bounds_raises(
        self, corner_grid: Grid, emitter: EffectEmitter
    ) -> None:
        with pytest.raises(IndexError):
            toggle_flag(corner_grid, 0, -1, emitter)


# ============================================================================
# Win Condition Tests
# ============================================================================

class TestWinCondition:
    """Test that a win needs flags exactly on the mines."""

    def test_flagging_every_mine_wins(
        self, diagonal_grid: Grid, emitter: EffectEmitter
    ) -> None:
        first = toggle_flag(diagonal_grid, 0, 0, emitter)
        second = toggle_flag(diagonal_grid, 1, 1, emitter)
        assert first.won is False
        assert second.won is True

    def test_missing_mine_does_not_win(
        self, diagonal_grid: Grid, emitter: EffectEmitter
    ) -> None:
        outcome = toggle_flag(diagonal_grid, 0, 0, emitter)
        assert outcome.won is False
        assert check_win(diagonal_grid) is False

    def test_extra_flag_does_not_win(
        self, diagonal_grid: Grid, emitter: EffectEmitter
    ) -> None:
        """A flag on a safe cell spoils an otherwise complete set."""
        toggle_flag(diagonal_grid, 0, 0, emitter)
        toggle_flag(diagonal_grid, 1, 1, emitter)
        outcome = toggle_flag(diagonal_grid, 1, 0, emitter)
        assert outcome.won is False

    def test_removing_extra_flag_wins_again(
        self, diagonal_grid: Grid, emitter: EffectEmitter
    ) -> None:
        toggle_flag(diagonal_grid, 1, 0, emitter)
        toggle_flag(diagonal_grid, 0, 0, emitter)
        toggle_flag(diagonal_grid, 1, 1, emitter)
        outcome = toggle_flag(diagonal_grid, 1, 0, emitter)
        assert outcome.won is True

    def test_check_win_matches_pointwise_equality(
        self, diagonal_grid: Grid
    ) -> None:
        diagonal_grid.flag[:] = diagonal_grid.mine
        assert check_win(diagonal_grid) is True
        diagonal_grid.flag[0, 1] = True
        assert check_win(diagonal_grid) is False
