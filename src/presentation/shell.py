"""
Screen state machine for the Minesweeper shell.

Splash, then title, then gameplay. The shell is headless: a host
drives it with frame ticks and input events and reads back the
session, particles and camera to draw them.
"""
from enum import Enum, auto
from typing import Optional, Tuple, Union

import numpy as np

from minefield.flags import FlagOutcome
from minefield.generator import DIFFICULTIES
from minefield.reveal import RevealOutcome
from minefield.session import GameSession

from .layout import BoardLayout, WINDOW_HEIGHT, WINDOW_WIDTH
from .particles import ParticleSystem, ScreenShake


# ============================================================================
# Constants
# ============================================================================

class Screen(Enum):
    """Screens the shell moves through."""

    SPLASH = auto()
    TITLE = auto()
    GAME = auto()


SPLASH_SECONDS = 3.0
MENU_CAMERA = (WINDOW_WIDTH * 0.5, WINDOW_HEIGHT * 0.5)
BOARD_CAMERA = (0.0, 0.0)


# ============================================================================
# Game Shell
# ============================================================================

class GameShell:
    """
    Finite-state shell around a game session.

    Input that does not apply to the current screen is ignored.
    """

    def __init__(
        self, rng: Union[np.random.Generator, int, None] = None
    ) -> None:
        """
        Initialize the shell on the splash screen.

        Args:
            rng: Random generator or seed shared by boards and effects.
        """
        self.rng = np.random.default_rng(rng)
        self.screen = Screen.SPLASH
        self.splash_timer = 0.0
        self.session: Optional[GameSession] = None
        self.layout: Optional[BoardLayout] = None
        self.particles = ParticleSystem()
        self.shake = ScreenShake(self.rng)
        self.camera_position = MENU_CAMERA

    # ========================================================================
    # Frame Update
    # ========================================================================

    def update(self, frame_time: float) -> None:
        """
        Advance timers and animation by one frame.

        Args:
            frame_time: Seconds since the previous frame.
        """
        self.shake.update(frame_time)

        if self.screen == Screen.SPLASH:
            self.splash_timer += frame_time
            if self.splash_timer > SPLASH_SECONDS:
                self.screen = Screen.TITLE
        elif self.screen == Screen.GAME:
            self.particles.update(frame_time)

    @property
    def camera_target(self) -> Tuple[float, float]:
        return (
            self.camera_position[0] + self.shake.offset[0],
            self.camera_position[1] + self.shake.offset[1],
        )

    # ========================================================================
    # Title Screen
    # ========================================================================

    def choose_difficulty(self, name: str) -> Optional[GameSession]:
        """
        Start a game from the title screen.

        Args:
            name: Key of DIFFICULTIES ("easy", "medium" or "hard").

        Returns:
            The new session, or None when not on the title screen.
        """
        config = DIFFICULTIES[name]
        if self.screen != Screen.TITLE:
            return None

        self.layout = BoardLayout(config.size)
        self.session = GameSession(
            config, rng=self.rng, locate=self.layout.effect_position
        )
        self.camera_position = BOARD_CAMERA
        self.screen = Screen.GAME
        return self.session

    # ========================================================================
    # Gameplay
    # ========================================================================

    def escape(self) -> bool:
        """Leave a running game for the title screen."""
        if self.screen != Screen.GAME or not self.session.is_playing:
            return False
        self._to_title()
        return True

    def primary_click(self, x: float, y: float) -> Optional[RevealOutcome]:
        """Reveal the cell under a pointer position."""
        if not self._in_game():
            return None
        col, row = self.layout.cell_at(x, y)
        return self.reveal_cell(col, row)

    def secondary_click(self, x: float, y: float) -> Optional[FlagOutcome]:
        """
        Flag the cell under a pointer, or restart once the game is over.

        After a win the restart also returns to the title screen.
        """
        if not self._in_game():
            return None
        if not self.session.is_playing:
            self._restart()
            return None
        col, row = self.layout.cell_at(x, y)
        return self.flag_cell(col, row)

    def reveal_cell(self, col: int, row: int) -> Optional[RevealOutcome]:
        if not self._in_game():
            return None
        outcome = self.session.reveal_at(col, row)
        self.particles.spawn(outcome.effects)
        if outcome.detonated:
            self.shake.kick()
        return outcome

    def flag_cell(self, col: int, row: int) -> Optional[FlagOutcome]:
        if not self._in_game():
            return None
        outcome = self.session.toggle_flag_at(col, row)
        self.particles.spawn(outcome.effects)
        return outcome

    def _in_game(self) -> bool:
        return self.screen == Screen.GAME and self.session is not None

    def _restart(self) -> None:
        won = self.session.is_won
        self.session.new_game()
        if won:
            self._to_title()

    def _to_title(self) -> None:
        self.camera_position = MENU_CAMERA
        self.screen = Screen.TITLE
