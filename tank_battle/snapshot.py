"""
Read-only world snapshots handed to the renderer and HUD.

A snapshot is a frozen copy of everything the presentation layer needs
for one frame, so drawing code can never mutate simulation state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tank_battle.game import Game, GameState
    from tank_battle.models.bullet import Bullet
    from tank_battle.models.particle import Particle
    from tank_battle.models.tank import Tank
    from tank_battle.models.wall import Wall, WallType


@dataclass(frozen=True)
class TankView:
    x: float
    y: float
    size: float
    angle: float
    is_player: bool
    hp: float
    max_hp: float

    @property
    def hp_ratio(self) -> float:
        return self.hp / self.max_hp if self.max_hp else 0.0

    @classmethod
    def from_tank(cls, tank: "Tank") -> "TankView":
        return cls(
            x=tank.x,
            y=tank.y,
            size=tank.size,
            angle=tank.angle,
            is_player=tank.is_player,
            hp=tank.hp,
            max_hp=tank.max_hp,
        )


@dataclass(frozen=True)
class BulletView:
    x: float
    y: float
    size: float
    is_player: bool

    @classmethod
    def from_bullet(cls, bullet: "Bullet") -> "BulletView":
        return cls(bullet.x, bullet.y, bullet.size, bullet.is_player)


@dataclass(frozen=True)
class WallView:
    x: float
    y: float
    width: float
    height: float
    wall_type: "WallType"

    @classmethod
    def from_wall(cls, wall: "Wall") -> "WallView":
        return cls(wall.x, wall.y, wall.width, wall.height, wall.wall_type)


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    size: float
    life: float
    color: tuple[int, int, int]

    @classmethod
    def from_particle(cls, particle: "Particle") -> "ParticleView":
        return cls(
            particle.x,
            particle.y,
            particle.size,
            max(particle.life, 0.0),
            particle.color,
        )


@dataclass(frozen=True)
class WorldSnapshot:
    """Everything needed to draw one frame and fill in the HUD."""

    state: "GameState"
    score: int
    high_score: int
    level: int
    player: TankView
    enemies: tuple[TankView, ...]
    bullets: tuple[BulletView, ...]
    walls: tuple[WallView, ...]
    particles: tuple[ParticleView, ...]

    @property
    def hp(self) -> float:
        return self.player.hp

    @property
    def max_hp(self) -> float:
        return self.player.max_hp

    @property
    def enemies_left(self) -> int:
        return len(self.enemies)

    @classmethod
    def from_game(cls, game: "Game") -> "WorldSnapshot":
        return cls(
            state=game.state,
            score=game.score_display.player_score,
            high_score=game.score_display.high_score,
            level=game.level,
            player=TankView.from_tank(game.player),
            enemies=tuple(TankView.from_tank(e) for e in game.enemies),
            bullets=tuple(BulletView.from_bullet(b) for b in game.bullets),
            walls=tuple(WallView.from_wall(w) for w in game.walls),
            particles=tuple(
                ParticleView.from_particle(p) for p in game.particles
            ),
        )
