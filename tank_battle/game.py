"""
Core game logic for Tank Battle.

Owns every entity collection, advances them one tick at a time, resolves
bullet / wall / tank interactions and explosions, and drives the
RUNNING / PAUSED / GAME_OVER state machine and level progression.

The simulation is deterministic given its inputs: randomness comes from
the injected ``rng`` and time only advances through ``update(delta_ms)``.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from tank_battle.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BRICK_WALL_CHANCE,
    DIRECT_HIT_DAMAGE,
    ENEMY_SPAWN_MARGIN,
    ENEMY_SPAWN_MIN_DISTANCE,
    EXPLOSION_DAMAGE,
    EXPLOSION_RADIUS,
    LEVEL_CLEAR_HEAL,
    MAX_SPAWN_ATTEMPTS,
    PARTICLE_COUNT,
    POINTS_PER_ENEMY,
    POINTS_PER_LEVEL,
    WALL_SIZE,
)
from tank_battle.models.bullet import Bullet
from tank_battle.models.particle import Particle
from tank_battle.models.tank import Tank
from tank_battle.models.wall import Wall, WallType
from tank_battle.snapshot import WorldSnapshot
from tank_battle.ui.text import ScoreDisplay
from tank_battle.utils.functions import (
    circle_collision,
    distance,
    enemy_count_for_level,
    enemy_max_hp_for_level,
    normalize,
    rect_collision,
    wall_count_for_level,
)
from tank_battle.utils.input_handler import GameAction, InputIntent

logger = logging.getLogger(__name__)


# ── Game states / events ────────────────────────────────────────────────────


class GameState(Enum):
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class GameEvent(Enum):
    """State changes the presentation layer may want to react to."""
    HEALTH_CHANGED = auto()
    SCORE_CHANGED = auto()
    ENEMY_DESTROYED = auto()
    WALL_DESTROYED = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()
    PAUSED = auto()
    RESUMED = auto()
    RESTARTED = auto()


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Top-level simulation controller.

    Call ``update`` once per frame with the elapsed milliseconds and the
    current input intent; read ``snapshot()`` to draw the result and
    ``drain_events()`` to learn what changed.
    """

    rng: random.Random = field(default_factory=random.Random, repr=False)
    start_level: int = 1
    level: int = field(default=1, init=False)
    state: GameState = field(default=GameState.RUNNING, init=False)

    # Entities
    player: Tank = field(init=False)
    enemies: list[Tank] = field(default_factory=list, init=False)
    bullets: list[Bullet] = field(default_factory=list, init=False)
    walls: list[Wall] = field(default_factory=list, init=False)
    particles: list[Particle] = field(default_factory=list, init=False)

    score_display: ScoreDisplay = field(default_factory=ScoreDisplay)
    clock_ms: float = 0.0
    events: list[GameEvent] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.start_level < 1:
            raise ValueError(f"start_level must be >= 1, got {self.start_level}")
        self.level = self.start_level
        self._init_world()

    # ── Convenience accessors ───────────────────────────────────────────

    @property
    def score(self) -> int:
        return self.score_display.player_score

    @property
    def is_paused(self) -> bool:
        return self.state == GameState.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    @property
    def enemies_left(self) -> int:
        return len(self.enemies)

    # ── World setup ─────────────────────────────────────────────────────

    def _init_world(self) -> None:
        """Place the player at the arena centre and build the first wave."""
        self.player = Tank(ARENA_WIDTH / 2, ARENA_HEIGHT / 2, is_player=True)
        self.generate_level()

    def generate_level(self) -> None:
        """Rebuild enemies and walls from scratch for ``self.level``."""
        max_hp = enemy_max_hp_for_level(self.level)
        self.enemies = []
        for _ in range(enemy_count_for_level(self.level)):
            x, y = self._enemy_spawn_point()
            self.enemies.append(Tank.spawn_enemy(x, y, max_hp, self.rng))

        self.walls = []
        for _ in range(wall_count_for_level(self.level)):
            x = int(self.rng.random() * (ARENA_WIDTH - WALL_SIZE) / WALL_SIZE) * WALL_SIZE
            y = int(self.rng.random() * (ARENA_HEIGHT - WALL_SIZE) / WALL_SIZE) * WALL_SIZE
            wall_type = (
                WallType.BRICK if self.rng.random() < BRICK_WALL_CHANCE
                else WallType.STEEL
            )
            self.walls.append(Wall(x, y, wall_type))

        logger.debug(
            "Level %d generated: %d enemies, %d walls",
            self.level, len(self.enemies), len(self.walls),
        )

    def _enemy_spawn_point(self) -> tuple[float, float]:
        """Sample a spawn point at least 200 units away from the player.

        Gives up after ``MAX_SPAWN_ATTEMPTS`` samples and uses the
        farthest candidate seen.
        """
        best: tuple[float, float] = (ENEMY_SPAWN_MARGIN, ENEMY_SPAWN_MARGIN)
        best_dist = -1.0
        for _ in range(MAX_SPAWN_ATTEMPTS):
            x = self.rng.random() * (ARENA_WIDTH - 2 * ENEMY_SPAWN_MARGIN) + ENEMY_SPAWN_MARGIN
            y = self.rng.random() * (ARENA_HEIGHT - 2 * ENEMY_SPAWN_MARGIN) + ENEMY_SPAWN_MARGIN
            dist = distance(x, y, self.player.x, self.player.y)
            if dist >= ENEMY_SPAWN_MIN_DISTANCE:
                return (x, y)
            if dist > best_dist:
                best, best_dist = (x, y), dist
        logger.warning(
            "No spawn point %d units from the player after %d attempts",
            ENEMY_SPAWN_MIN_DISTANCE, MAX_SPAWN_ATTEMPTS,
        )
        return best

    # ── State transitions ───────────────────────────────────────────────

    def toggle_pause(self) -> GameState:
        """Switch between RUNNING and PAUSED.  Ignored after game over."""
        if self.state == GameState.RUNNING:
            self.state = GameState.PAUSED
            self.events.append(GameEvent.PAUSED)
        elif self.state == GameState.PAUSED:
            self.state = GameState.RUNNING
            self.events.append(GameEvent.RESUMED)
        return self.state

    def restart(self) -> None:
        """Start over from level 1 with a fresh player and empty score."""
        self.score_display.reset()
        self.level = 1
        self.state = GameState.RUNNING
        self.bullets = []
        self.particles = []
        self._init_world()
        logger.info("Game restarted")
        self.events.extend(
            (GameEvent.RESTARTED, GameEvent.SCORE_CHANGED, GameEvent.HEALTH_CHANGED)
        )

    def game_over(self) -> None:
        if self.state == GameState.GAME_OVER:
            return
        self.state = GameState.GAME_OVER
        logger.info(
            "Game over: score %d, level %d", self.score, self.level
        )
        self.events.append(GameEvent.GAME_OVER)

    def level_complete(self) -> None:
        """Advance to the next wave, with a score bonus and some healing."""
        self.level += 1
        self._add_score(POINTS_PER_LEVEL)
        self.player.heal(LEVEL_CLEAR_HEAL)
        self.events.append(GameEvent.HEALTH_CHANGED)
        self.generate_level()
        logger.info("Level complete, now on level %d", self.level)
        self.events.append(GameEvent.LEVEL_COMPLETE)

    # ── Player actions ──────────────────────────────────────────────────

    def fire(self, target_angle: Optional[float] = None) -> bool:
        """Fire the player's gun.  Returns True if a bullet was spawned."""
        if self.state != GameState.RUNNING:
            return False
        bullet = self.player.shoot(self.clock_ms, target_angle)
        if bullet is None:
            return False
        self.bullets.append(bullet)
        return True

    def handle_action(
        self, action: GameAction, intent: Optional[InputIntent] = None
    ) -> None:
        """Apply a discrete input action.

        FIRE aims at the intent's pointer when there is one, otherwise
        along the current heading.
        """
        if action == GameAction.FIRE:
            angle = None
            if intent is not None and intent.has_aim_point and intent.heading is None:
                self.player.aim_at(intent.aim_x, intent.aim_y)
                angle = self.player.angle
            self.fire(angle)
        elif action == GameAction.PAUSE:
            self.toggle_pause()
        elif action == GameAction.RESTART:
            self.restart()

    # ── Damage resolution ───────────────────────────────────────────────

    def _add_score(self, points: int) -> None:
        self.score_display.add(points)
        self.events.append(GameEvent.SCORE_CHANGED)

    def _damage_player(self, amount: float) -> None:
        killed = self.player.take_damage(amount)
        self.events.append(GameEvent.HEALTH_CHANGED)
        if killed:
            self.game_over()

    def create_explosion(self, x: float, y: float) -> None:
        """Spawn particles at (*x*, *y*) and apply splash damage.

        Everything whose centre lies within ``EXPLOSION_RADIUS`` takes
        ``EXPLOSION_DAMAGE``: the player, each enemy (killed ones score
        points) and each wall (steel is unaffected).  Walls do not shield
        anything behind them.
        """
        for _ in range(PARTICLE_COUNT):
            self.particles.append(Particle.burst(x, y, self.rng))

        if distance(x, y, self.player.x, self.player.y) < EXPLOSION_RADIUS:
            self._damage_player(EXPLOSION_DAMAGE)

        dead_enemies: set[int] = set()
        for enemy in self.enemies:
            if distance(x, y, enemy.x, enemy.y) < EXPLOSION_RADIUS:
                if enemy.take_damage(EXPLOSION_DAMAGE):
                    dead_enemies.add(id(enemy))
                    self._add_score(POINTS_PER_ENEMY)
                    self.events.append(GameEvent.ENEMY_DESTROYED)

        destroyed_walls: set[int] = set()
        for wall in self.walls:
            cx, cy = wall.center
            if distance(x, y, cx, cy) < EXPLOSION_RADIUS:
                if wall.take_damage(EXPLOSION_DAMAGE):
                    destroyed_walls.add(id(wall))
                    self.events.append(GameEvent.WALL_DESTROYED)

        if dead_enemies:
            self.enemies = [e for e in self.enemies if id(e) not in dead_enemies]
        if destroyed_walls:
            self.walls = [w for w in self.walls if id(w) not in destroyed_walls]

    # ── Per-frame update ────────────────────────────────────────────────

    def update(
        self, delta_ms: float, intent: Optional[InputIntent] = None
    ) -> GameState:
        """Advance the simulation by one tick of *delta_ms* milliseconds.

        Does nothing while paused or after game over.  Returns the state
        after the tick.
        """
        if delta_ms < 0:
            raise ValueError(f"delta_ms must be non-negative, got {delta_ms}")
        if self.state != GameState.RUNNING:
            return self.state

        self.clock_ms += delta_ms
        if intent is None:
            intent = InputIntent()

        # 1. Player movement
        dx, dy = normalize(intent.move_x, intent.move_y)
        if dx or dy:
            self.player.move(dx, dy, self.walls, self.enemies)

        # 2. Player heading
        if intent.heading is not None:
            self.player.angle = intent.heading
        elif intent.has_aim_point:
            self.player.aim_at(intent.aim_x, intent.aim_y)

        # 3. Enemy AI
        others = self.enemies + [self.player]
        for enemy in self.enemies:
            bullet = enemy.update_ai(
                self.player, self.walls, others, delta_ms,
                now_ms=self.clock_ms, rng=self.rng,
            )
            if bullet is not None:
                self.bullets.append(bullet)

        # 4. Bullets and their collisions
        for bullet in list(self.bullets):
            self._update_bullet(bullet)

        # 5. Drop spent bullets
        self.bullets = [b for b in self.bullets if b.is_active]

        # 6. Particles
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if not p.is_dead]

        # 7. Wave cleared?
        if self.state == GameState.RUNNING and not self.enemies:
            self.level_complete()

        return self.state

    def _update_bullet(self, bullet: Bullet) -> None:
        bullet.update()

        for wall in self.walls:
            if rect_collision(*bullet.bounding_box, wall.x, wall.y, wall.width, wall.height):
                bullet.deactivate()
                # Only player shells explode
                if bullet.is_player:
                    self.create_explosion(bullet.x, bullet.y)
                break

        if not bullet.is_active:
            return

        if bullet.is_player:
            for enemy in self.enemies:
                if circle_collision(bullet, enemy, bullet.size, enemy.size / 2):
                    bullet.deactivate()
                    self.create_explosion(bullet.x, bullet.y)
                    break
        elif circle_collision(bullet, self.player, bullet.size, self.player.size / 2):
            bullet.deactivate()
            self._damage_player(DIRECT_HIT_DAMAGE)

    # ── Presentation hooks ──────────────────────────────────────────────

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot.from_game(self)

    def drain_events(self) -> list[GameEvent]:
        """Return and clear the events emitted since the last call."""
        events, self.events = self.events, []
        return events
