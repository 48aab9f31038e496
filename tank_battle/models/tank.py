"""
Tank model for Tank Battle.

One class serves both the player and the AI enemies.  Movement is
all-or-nothing: a step that would leave the arena, clip a wall or bump
another tank is simply not taken (no sliding along the free axis).

Firing is gated by a cooldown measured against the simulation clock
that the caller passes in, so the model never reads wall-clock time.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from tank_battle.config import (
    AI_CHANGE_INTERVAL_MIN,
    AI_CHANGE_INTERVAL_SPAN,
    AI_FIRE_CHANCE,
    AI_FIRE_RANGE,
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BARREL_EXTRA_LENGTH,
    ENEMY_SHOOT_COOLDOWN,
    PLAYER_SHOOT_COOLDOWN,
    TANK_MAX_HP,
    TANK_SIZE,
    TANK_SPEED,
)
from tank_battle.models.bullet import Bullet
from tank_battle.models.wall import Wall
from tank_battle.utils.functions import (
    angle_to,
    circle_collision,
    distance,
    rect_collision,
    to_radians,
)

logger = logging.getLogger(__name__)


def random_ai_interval(rng: random.Random) -> float:
    """Pick how long an AI tank keeps its current heading (ms)."""
    return rng.random() * AI_CHANGE_INTERVAL_SPAN + AI_CHANGE_INTERVAL_MIN


@dataclass(eq=False)
class Tank:
    """A player or AI controlled tank centred at (*x*, *y*).

    ``angle`` is the visual/turret heading in degrees.  The ``ai_*``
    fields are only used by enemy tanks: ``ai_direction`` is the heading
    the tank drives along, which differs from the turret heading.
    """

    x: float
    y: float
    is_player: bool = False
    size: float = TANK_SIZE
    speed: float = TANK_SPEED
    angle: float = 0.0
    hp: float = TANK_MAX_HP
    max_hp: float = TANK_MAX_HP
    last_shoot_time: float = -math.inf
    shoot_cooldown: Optional[float] = None

    # AI state
    ai_timer: float = 0.0
    ai_direction: float = 0.0
    ai_change_interval: float = AI_CHANGE_INTERVAL_MIN

    def __post_init__(self) -> None:
        if self.shoot_cooldown is None:
            self.shoot_cooldown = (
                PLAYER_SHOOT_COOLDOWN if self.is_player
                else ENEMY_SHOOT_COOLDOWN
            )

    @classmethod
    def spawn_enemy(
        cls, x: float, y: float, max_hp: float, rng: random.Random
    ) -> "Tank":
        """Create a full-health AI tank with a random initial course."""
        return cls(
            x=x,
            y=y,
            is_player=False,
            hp=max_hp,
            max_hp=max_hp,
            ai_direction=rng.random() * 360,
            ai_change_interval=random_ai_interval(rng),
        )

    # Properties ──────────────────────────────────────────────────────────

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def is_dead(self) -> bool:
        return self.hp <= 0

    @property
    def hp_ratio(self) -> float:
        return self.hp / self.max_hp if self.max_hp else 0.0

    # Movement ────────────────────────────────────────────────────────────

    def move(
        self,
        dir_x: float,
        dir_y: float,
        walls: Iterable[Wall],
        other_tanks: Iterable["Tank"],
    ) -> bool:
        """Try to step ``speed`` units along (*dir_x*, *dir_y*).

        Returns True if the tank moved.  The step is rejected as a whole
        if the hull would touch or cross the arena edge, overlap a wall,
        or overlap another tank.
        """
        new_x = self.x + dir_x * self.speed
        new_y = self.y + dir_y * self.speed
        half = self.size / 2

        if new_x - half <= 0 or new_x + half >= ARENA_WIDTH:
            return False
        if new_y - half <= 0 or new_y + half >= ARENA_HEIGHT:
            return False

        for wall in walls:
            if rect_collision(
                new_x - half, new_y - half, self.size, self.size,
                wall.x, wall.y, wall.width, wall.height,
            ):
                return False

        candidate = _Point(new_x, new_y)
        for tank in other_tanks:
            if tank is self:
                continue
            if circle_collision(candidate, tank, half, tank.size / 2):
                return False

        self.x = new_x
        self.y = new_y
        return True

    def aim_at(self, x: float, y: float) -> None:
        self.angle = angle_to(self.x, self.y, x, y)

    # Combat ──────────────────────────────────────────────────────────────

    def can_shoot(self, now_ms: float) -> bool:
        return now_ms - self.last_shoot_time >= self.shoot_cooldown

    def shoot(
        self, now_ms: float, target_angle: Optional[float] = None
    ) -> Optional[Bullet]:
        """Fire a bullet, or return None while the gun is cooling down.

        The bullet leaves the muzzle, ``size / 2 + 10`` units from the
        centre along *target_angle* (the current heading if omitted).
        """
        if not self.can_shoot(now_ms):
            return None
        self.last_shoot_time = now_ms

        angle = self.angle if target_angle is None else target_angle
        barrel = self.size / 2 + BARREL_EXTRA_LENGTH
        return Bullet(
            x=self.x + math.cos(to_radians(angle)) * barrel,
            y=self.y + math.sin(to_radians(angle)) * barrel,
            angle=angle,
            is_player=self.is_player,
        )

    def take_damage(self, amount: float) -> bool:
        """Subtract *amount* hp (never below zero).  True if now dead."""
        self.hp = max(self.hp - amount, 0)
        logger.debug(
            "%s tank took %s damage, hp=%s",
            "player" if self.is_player else "enemy", amount, self.hp,
        )
        return self.hp <= 0

    def heal(self, amount: float) -> None:
        self.hp = min(self.hp + amount, self.max_hp)

    # AI ──────────────────────────────────────────────────────────────────

    def update_ai(
        self,
        player: "Tank",
        walls: Iterable[Wall],
        other_tanks: Iterable["Tank"],
        delta_ms: float,
        now_ms: float,
        rng: random.Random,
    ) -> Optional[Bullet]:
        """Run one tick of enemy behaviour.

        The tank wanders along ``ai_direction`` (re-rolled every 1-3 s),
        keeps its turret on the player, and within range has a small
        per-tick chance of firing.  Returns the fired bullet, if any.
        Player tanks are left untouched.
        """
        if self.is_player:
            return None

        self.ai_timer += delta_ms
        if self.ai_timer > self.ai_change_interval:
            self.ai_timer = 0
            self.ai_direction = rng.random() * 360
            self.ai_change_interval = random_ai_interval(rng)

        self.aim_at(player.x, player.y)

        heading = to_radians(self.ai_direction)
        self.move(math.cos(heading), math.sin(heading), walls, other_tanks)

        if distance(self.x, self.y, player.x, player.y) < AI_FIRE_RANGE:
            if rng.random() < AI_FIRE_CHANCE:
                return self.shoot(now_ms)
        return None


@dataclass(frozen=True)
class _Point:
    x: float
    y: float
