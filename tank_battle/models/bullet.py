"""
Bullet model for Tank Battle.

A bullet travels in a straight line at constant velocity until it
leaves the arena or hits something.  Player bullets explode on impact;
enemy bullets only ever hurt the player directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from tank_battle.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BULLET_SIZE,
    BULLET_SPEED,
)
from tank_battle.utils.functions import to_radians


@dataclass
class Bullet:
    """A projectile fired by a tank.

    Velocity is derived once from ``angle`` when the bullet is created
    and never changes afterwards.
    """

    x: float
    y: float
    angle: float
    is_player: bool = False
    speed: float = BULLET_SPEED
    size: float = BULLET_SIZE
    is_active: bool = True
    vx: float = field(default=0.0, init=False)
    vy: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.vx = math.cos(to_radians(self.angle)) * self.speed
        self.vy = math.sin(to_radians(self.angle)) * self.speed

    @property
    def bounding_box(self) -> tuple[float, float, float, float]:
        """(x, y, w, h) box used for wall hits."""
        return (
            self.x - self.size,
            self.y - self.size,
            self.size * 2,
            self.size * 2,
        )

    def update(self) -> None:
        """Advance one tick; deactivate once outside the arena."""
        self.x += self.vx
        self.y += self.vy
        if (
            self.x < 0 or self.x > ARENA_WIDTH
            or self.y < 0 or self.y > ARENA_HEIGHT
        ):
            self.is_active = False

    def deactivate(self) -> None:
        self.is_active = False
