"""Utility functions and helpers."""

from .functions import (
    angle_to,
    circle_collision,
    distance,
    enemy_count_for_level,
    enemy_max_hp_for_level,
    normalize,
    rect_collision,
    to_radians,
    wall_count_for_level,
)
from .input_handler import GameAction, InputIntent

__all__ = [
    "angle_to",
    "circle_collision",
    "distance",
    "enemy_count_for_level",
    "enemy_max_hp_for_level",
    "normalize",
    "rect_collision",
    "to_radians",
    "wall_count_for_level",
    "GameAction",
    "InputIntent",
]
