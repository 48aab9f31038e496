"""User interface components.

``renderer`` needs pygame and is imported directly by the front end.
"""

from .text import HudText, ScoreDisplay

__all__ = [
    "HudText",
    "ScoreDisplay",
]
