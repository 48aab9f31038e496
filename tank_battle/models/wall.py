"""
Wall model for Tank Battle.

Walls sit on a 40-unit grid.  Brick walls crumble after enough splash
damage; steel walls are indestructible.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tank_battle.config import BRICK_WALL_HP, STEEL_WALL_HP, WALL_SIZE


class WallType(Enum):
    BRICK = "brick"
    STEEL = "steel"


@dataclass
class Wall:
    """A square obstacle with its top-left corner at (*x*, *y*)."""

    x: float
    y: float
    wall_type: WallType = WallType.BRICK
    width: int = WALL_SIZE
    height: int = WALL_SIZE
    hp: Optional[float] = None

    def __post_init__(self) -> None:
        if self.hp is None:
            self.hp = (
                BRICK_WALL_HP if self.wall_type is WallType.BRICK
                else STEEL_WALL_HP
            )

    @property
    def is_destructible(self) -> bool:
        return self.wall_type is WallType.BRICK

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_destroyed(self) -> bool:
        return self.is_destructible and self.hp <= 0

    def take_damage(self, amount: float) -> bool:
        """Apply *amount* damage.  Returns True if this destroyed the wall.

        Steel walls ignore damage entirely.
        """
        if not self.is_destructible:
            return False
        self.hp -= amount
        return self.hp <= 0
