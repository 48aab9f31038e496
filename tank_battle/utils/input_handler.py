"""
Input handler for Tank Battle.

Turns raw device state (keys, pointer, touch joystick) into the
per-tick movement/aim intent and discrete actions the game consumes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from tank_battle.config import JOYSTICK_DEAD_ZONE
from tank_battle.utils.functions import normalize


class GameAction(Enum):
    """Discrete actions the player can trigger."""
    FIRE = auto()
    PAUSE = auto()
    RESTART = auto()
    QUIT = auto()
    NONE = auto()


@dataclass
class InputIntent:
    """Movement and aim intent for a single tick.

    ``move_x``/``move_y`` need not be normalized; the game does that.
    ``heading`` overrides pointer aiming when set (directional pad or
    touch joystick).
    """
    move_x: float = 0.0
    move_y: float = 0.0
    aim_x: Optional[float] = None
    aim_y: Optional[float] = None
    heading: Optional[float] = None

    @property
    def has_aim_point(self) -> bool:
        return self.aim_x is not None and self.aim_y is not None

    @classmethod
    def from_keys(
        cls,
        up: bool = False,
        down: bool = False,
        left: bool = False,
        right: bool = False,
        aim: Optional[tuple[float, float]] = None,
    ) -> "InputIntent":
        """Build an intent from four direction flags and a pointer."""
        dx = (1 if right else 0) - (1 if left else 0)
        dy = (1 if down else 0) - (1 if up else 0)
        aim_x, aim_y = aim if aim is not None else (None, None)
        return cls(move_x=dx, move_y=dy, aim_x=aim_x, aim_y=aim_y)

    @classmethod
    def from_joystick(
        cls,
        dx: float,
        dy: float,
        aim: Optional[tuple[float, float]] = None,
    ) -> "InputIntent":
        """Build an intent from a joystick offset.

        Offsets inside the dead zone produce no movement and leave the
        pointer (if any) in charge of aiming.  Outside it the tank moves
        and faces along the stick.
        """
        aim_x, aim_y = aim if aim is not None else (None, None)
        if math.hypot(dx, dy) <= JOYSTICK_DEAD_ZONE:
            return cls(aim_x=aim_x, aim_y=aim_y)
        ux, uy = normalize(dx, dy)
        heading = math.atan2(dy, dx) * 180 / math.pi
        return cls(move_x=ux, move_y=uy, heading=heading)
