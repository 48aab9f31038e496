"""
Tank Battle - top-down arcade tank combat
"""

__version__ = "1.0.0"

from .game import Game, GameEvent, GameState
from .config import *  # noqa: F401,F403

__all__ = ["Game", "GameEvent", "GameState"]
