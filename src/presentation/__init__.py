"""
Minesweeper presentation shell.

Headless screen state machine, board layout and cosmetic animation
layered over the minefield engine.
"""
from .layout import BoardLayout, WINDOW_WIDTH, WINDOW_HEIGHT
from .particles import Particle, ParticleSystem, ScreenShake
from .shell import GameShell, Screen

__all__ = [
    "BoardLayout",
    "WINDOW_WIDTH",
    "WINDOW_HEIGHT",
    "Particle",
    "ParticleSystem",
    "ScreenShake",
    "GameShell",
    "Screen",
]
