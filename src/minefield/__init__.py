"""
Minesweeper board engine.

Provides board generation, reveal and flag rules, effect emission and
the game session that ties them together.
"""
from .grid import Grid, UNREVEALED
from .effects import EffectDescriptor, EffectEmitter
from .generator import (
    BoardConfig,
    MINE_DENSITY,
    EASY,
    MEDIUM,
    HARD,
    DIFFICULTIES,
    generate,
    grid_from_mines,
    mine_count,
)
from .reveal import RevealOutcome, RevealResult, reveal, count_adjacent_mines
from .flags import FlagOutcome, FlagResult, toggle_flag, check_win
from .session import GameSession, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Grid",
    "UNREVEALED",
    "EffectDescriptor",
    "EffectEmitter",
    "BoardConfig",
    "MINE_DENSITY",
    "EASY",
    "MEDIUM",
    "HARD",
    "DIFFICULTIES",
    "generate",
    "grid_from_mines",
    "mine_count",
    "RevealOutcome",
    "RevealResult",
    "reveal",
    "count_adjacent_mines",
    "FlagOutcome",
    "FlagResult",
    "toggle_flag",
    "check_win",
    "GameSession",
    "GameState",
    "MinesweeperEnv",
]
