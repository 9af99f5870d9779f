"""
Game session for Minesweeper.

Owns the active grid and game state, and routes player actions to the
reveal engine and flag manager.
"""
from enum import Enum, auto
from typing import Optional, Union

import numpy as np

from .effects import EffectEmitter, Locator
from .flags import FlagOutcome, FlagResult, toggle_flag
from .generator import BoardConfig, EASY, generate_from_config
from .grid import Grid
from .reveal import RevealOutcome, RevealResult, reveal


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_over(self) -> bool:
        return self != GameState.PLAYING


FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Session Class
# ============================================================================

class GameSession:
    """
    A single player's game.

    Every action runs to completion before returning. Actions taken
    after the game is over are ignored.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Union[np.random.Generator, int, None] = None,
        locate: Optional[Locator] = None,
        grid: Optional[Grid] = None,
    ) -> None:
        """
        Initialize the session and generate the first board.

        Args:
            config: Board configuration (default: easy).
            rng: Random generator or seed for boards and effects.
            locate: Maps (col, row) to the position effects spawn at.
            grid: Prebuilt board to play instead of a generated one.
        """
        self.config = config or EASY
        self.rng = np.random.default_rng(rng)
        self.emitter = EffectEmitter(self.rng, locate)
        self._game_state = GameState.PLAYING
        if grid is not None:
            self.config = BoardConfig(grid.size, self.config.mine_density)
            self.grid = grid
        else:
            self.grid = generate_from_config(self.config, self.rng)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal_at(self, col: int, row: int) -> RevealOutcome:
        """
        Reveal a cell; a mine ends the game as lost.

        Args:
            col: Column index.
            row: Row index.

        Returns:
            Outcome of the reveal.
        """
        self.grid.check_bounds(col, row)
        if self._game_state.is_over:
            return RevealOutcome(RevealResult.NO_OP)

        outcome = reveal(self.grid, col, row, self.emitter)
        if outcome.detonated:
            self._game_state = GameState.LOST
        return outcome

    def toggle_flag_at(self, col: int, row: int) -> FlagOutcome:
        """
        Toggle a flag; flags matching every mine win the game.

        Args:
            col: Column index.
            row: Row index.

        Returns:
            Outcome of the toggle.
        """
        self.grid.check_bounds(col, row)
        if self._game_state.is_over:
            return FlagOutcome(FlagResult.NO_OP)

        outcome = toggle_flag(self.grid, col, row, self.emitter)
        if outcome.won:
            self._game_state = GameState.WON
        return outcome

    def new_game(self, size: Optional[int] = None) -> None:
        """
        Replace the board with a freshly generated one.

        Args:
            size: New board size (default: keep the current size).
        """
        if size is not None:
            self.config = BoardConfig(size, self.config.mine_density)
        self.grid = generate_from_config(self.config, self.rng)
        self._game_state = GameState.PLAYING

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def is_playing(self) -> bool:
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._game_state == GameState.LOST

    def value_at(self, col: int, row: int) -> int:
        return self.grid.value_at(col, row)

    def is_flagged(self, col: int, row: int) -> bool:
        return self.grid.is_flagged(col, row)

    def visible_mines(self) -> Optional[np.ndarray]:
        """Get the mine matrix once the game is over, else None."""
        if not self._game_state.is_over:
            return None
        return self.grid.mine.copy()

    def observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array indexed [row, col] where:
                -1 = unrevealed
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = mine (only after game over)
        """
        obs = self.grid.cell_value.copy()
        obs[self.grid.flag] = FLAGGED_OBSERVATION
        if self._game_state.is_over:
            obs[self.grid.mine] = MINE_OBSERVATION
        return obs
