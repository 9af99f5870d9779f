"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game session through the standard RL interface, so
programmatic hosts can drive reveal and flag actions.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .generator import BoardConfig
from .grid import UNREVEALED
from .session import GameSession, FLAGGED_OBSERVATION, MINE_OBSERVATION


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = unrevealed cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = mine (shown once the game is over)

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size reveals cell (i % size, i // size);
        the remaining actions toggle the flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for a flag toggle that does not win
        - -0.1 for an action that does nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 easy board).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config, rng=self.np_random)
        self.render_mode = render_mode

        size = self.config.size
        self._cells = size * size

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment with a freshly generated board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = GameSession(self.config, rng=self.np_random)
        self._steps = 0

        return self.session.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, col, row = self.decode_action(action)
        self._steps += 1

        if flag:
            reward = self._flag_reward(col, row)
        else:
            reward = self._reveal_reward(col, row)

        observation = self.session.observation()
        terminated = not self.session.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert action index to (is_flag, col, row)."""
        action = int(action)
        if not 0 <= action < 2 * self._cells:
            raise IndexError(f"Action {action} outside action space")
        flag = action >= self._cells
        index = action % self._cells
        return flag, index % self.config.size, index // self.config.size

    def encode_action(self, col: int, row: int, flag: bool = False) -> int:
        """Convert (col, row) and action kind to an action index."""
        index = row * self.config.size + col
        return index + self._cells if flag else index

    def _reveal_reward(self, col: int, row: int) -> float:
        outcome = self.session.reveal_at(col, row)
        if outcome.is_noop:
            return -0.1
        if outcome.detonated:
            return -10.0
        return 1.0

    def _flag_reward(self, col: int, row: int) -> float:
        outcome = self.session.toggle_flag_at(col, row)
        if outcome.is_noop:
            return -0.1
        if outcome.won:
            return 10.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        grid = self.session.grid
        return {
            "steps": self._steps,
            "revealed": grid.revealed_total,
            "flags": grid.flag_total,
            "mines": grid.mine_total,
            "game_state": self.session.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.session.observation())
        if self.render_mode == "human":
            print(render_ansi(self.session.observation()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that change the board.

        Returns:
            int8 array, 1 = valid action. Reveals need an unrevealed,
            unflagged cell; flags need an unrevealed cell.
        """
        grid = self.session.grid
        unrevealed = (grid.cell_value == UNREVEALED).flatten()
        revealable = unrevealed & ~grid.flag.flatten()
        if not self.session.is_playing:
            unrevealed = np.zeros_like(unrevealed)
            revealable = unrevealed
        return np.concatenate([revealable, unrevealed]).astype(np.int8)


# ============================================================================
# Random Play
# ============================================================================

def run_random_episode(
    env: MinesweeperEnv,
    rng: np.random.Generator,
    max_steps: int = 1000,
) -> Dict[str, Any]:
    """
    Play masked random actions until the episode ends.

    The episode also ends when no action would change the board, e.g.
    a board without mines whose cells are all revealed.

    Args:
        env: Environment already reset for the episode.
        rng: Source of action choices.
        max_steps: Step limit.

    Returns:
        Info dictionary of the last step (of the reset if no step ran).
    """
    info = env._get_info()
    for _ in range(max_steps):
        mask = env.get_action_mask()
        if not mask.any():
            break
        action = int(rng.choice(np.flatnonzero(mask)))
        _, _, terminated, truncated, info = env.step(action)
        if terminated or truncated:
            break
    return info


# ============================================================================
# Text Rendering
# ============================================================================

def render_ansi(observation: np.ndarray) -> str:
    """Render an observation as an ASCII board."""
    lines = []
    for row in observation:
        row_str = ""
        for val in row:
            if val == UNREVEALED:
                row_str += "."
            elif val == FLAGGED_OBSERVATION:
                row_str += "F"
            elif val == MINE_OBSERVATION:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)
