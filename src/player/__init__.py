from .player import Player
from .mover import Mover, Oscillator

__all__ = [
    "Player",
    "Mover",
    "Oscillator",
]
