"""
Cosmetic animation for the Minesweeper shell.

Particles spawned from effect descriptors and the camera shake that
follows a detonation. Both advance in ticks normalised to 60 per
second.
"""
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

import numpy as np

from minefield.effects import EffectDescriptor


# ============================================================================
# Constants
# ============================================================================

TICKS_PER_SECOND = 60.0

GRAVITY = 0.5
DRAG = 0.94

SHAKE_RANGE = 80.0
SHAKE_INTERVAL = 2.0
SHAKE_DAMPING = -0.5


# ============================================================================
# Particles
# ============================================================================

@dataclass
class Particle:
    """A live smoke particle."""

    x: float
    y: float
    velocity_x: float
    velocity_y: float
    life: float

    @classmethod
    def from_effect(cls, effect: EffectDescriptor) -> "Particle":
        return cls(
            x=effect.position[0],
            y=effect.position[1],
            velocity_x=effect.velocity[0],
            velocity_y=effect.velocity[1],
            life=effect.life,
        )

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def update(self, ticks: float) -> None:
        """
        Advance one frame.

        Velocity and position step once per frame; life drains by the
        elapsed ticks.
        """
        self.velocity_y += GRAVITY
        self.velocity_x *= DRAG
        self.x += self.velocity_x
        self.y += self.velocity_y
        self.life -= ticks

    @property
    def is_alive(self) -> bool:
        return self.life > 0


class ParticleSystem:
    """Owns every particle spawned from game effects."""

    def __init__(self) -> None:
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def spawn(self, effects: Iterable[EffectDescriptor]) -> None:
        self.particles.extend(Particle.from_effect(e) for e in effects)

    def update(self, frame_time: float) -> None:
        """
        Step every particle and drop the expired ones.

        Args:
            frame_time: Seconds since the previous frame.
        """
        ticks = frame_time * TICKS_PER_SECOND
        for particle in self.particles:
            particle.update(ticks)
        self.particles = [p for p in self.particles if p.is_alive]


# ============================================================================
# Screen Shake
# ============================================================================

class ScreenShake:
    """
    Camera offset that flips and halves every SHAKE_INTERVAL ticks.
    """

    def __init__(
        self, rng: Union[np.random.Generator, int, None] = None
    ) -> None:
        self.rng = np.random.default_rng(rng)
        self.offset = (0.0, 0.0)
        self.timer = SHAKE_INTERVAL

    def kick(self) -> None:
        """Start a new shake with a random offset."""
        offset = self.rng.uniform(-SHAKE_RANGE, SHAKE_RANGE, size=2)
        self.offset = (float(offset[0]), float(offset[1]))

    def update(self, frame_time: float) -> None:
        self.timer -= frame_time * TICKS_PER_SECOND
        if self.timer <= 0:
            self.timer = SHAKE_INTERVAL
            self.offset = (
                self.offset[0] * SHAKE_DAMPING,
                self.offset[1] * SHAKE_DAMPING,
            )
