"""
Effect emitter for Minesweeper.

Translates game events into particle spawn requests. The emitter keeps
no particles itself; the presentation layer owns whatever it spawns
from the descriptors.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple, Union

import numpy as np


# ============================================================================
# Constants
# ============================================================================

REVEAL_BURST = 5
FLAG_BURST = 2
DETONATION_BURST = 5

PARTICLE_LIFE = 80.0
VELOCITY_X_RANGE = (-4.0, 4.0)
VELOCITY_Y_RANGE = (-10.0, -1.0)

# Offset from a cell's top-left corner, in tiles.
CELL_ANCHOR = 0.2

Locator = Callable[[int, int], Tuple[float, float]]


def tile_locator(col: int, row: int) -> Tuple[float, float]:
    """Position of a cell in tile units."""
    return (col + CELL_ANCHOR, row + CELL_ANCHOR)


# ============================================================================
# Effect Descriptor
# ============================================================================

@dataclass(frozen=True)
class EffectDescriptor:
    """
    Request to spawn one cosmetic particle.

    Attributes:
        position: Spawn position (x, y).
        velocity: Initial velocity (x, y).
        life: Initial life in update ticks.
    """

    position: Tuple[float, float]
    velocity: Tuple[float, float]
    life: float = PARTICLE_LIFE


# ============================================================================
# Effect Emitter
# ============================================================================

class EffectEmitter:
    """
    Stateless event-to-particle translator.

    Velocities are sampled from the injected random generator, so a
    seeded emitter produces a reproducible effect stream.
    """

    def __init__(
        self,
        rng: Union[np.random.Generator, int, None] = None,
        locate: Optional[Locator] = None,
    ) -> None:
        """
        Initialize the emitter.

        Args:
            rng: Random generator or seed for velocity sampling.
            locate: Maps (col, row) to a visual position.
        """
        self.rng = np.random.default_rng(rng)
        self.locate = locate or tile_locator

    def burst(self, col: int, row: int, count: int) -> List[EffectDescriptor]:
        """Emit count descriptors at a cell's position."""
        position = self.locate(col, row)
        return [
            EffectDescriptor(position=position, velocity=self._velocity())
            for _ in range(count)
        ]

    def reveal(self, col: int, row: int) -> List[EffectDescriptor]:
        return self.burst(col, row, REVEAL_BURST)

    def flag(self, col: int, row: int) -> List[EffectDescriptor]:
        return self.burst(col, row, FLAG_BURST)

    def detonation(
        self, cells: Iterable[Tuple[int, int]]
    ) -> List[EffectDescriptor]:
        """Emit a burst at every mine cell."""
        effects: List[EffectDescriptor] = []
        for col, row in cells:
            effects.extend(self.burst(col, row, DETONATION_BURST))
        return effects

    def _velocity(self) -> Tuple[float, float]:
        velocity_x = float(self.rng.uniform(*VELOCITY_X_RANGE))
        velocity_y = float(self.rng.uniform(*VELOCITY_Y_RANGE))
        return (velocity_x, velocity_y)
