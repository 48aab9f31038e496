"""
Unit tests for Tank Battle models and helpers.

Covers geometry, tank movement / firing / damage / AI, bullet flight,
wall durability and particle decay.
"""

import math

import pytest

from tank_battle.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BRICK_WALL_HP,
    BULLET_SPEED,
    ENEMY_SHOOT_COOLDOWN,
    PLAYER_SHOOT_COOLDOWN,
    STEEL_WALL_HP,
    TANK_SPEED,
)
from tank_battle.models.bullet import Bullet
from tank_battle.models.particle import Particle, hue_to_rgb
from tank_battle.models.tank import Tank
from tank_battle.models.wall import Wall, WallType
from tank_battle.utils.functions import (
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


# ── Geometry ───────────────────────────────────────────────────────────────


class TestGeometry:
    def test_distance(self):
        assert distance(0, 0, 3, 4) == 5

    def test_distance_symmetry(self):
        assert distance(10, 20, 50, 80) == distance(50, 80, 10, 20)

    def test_to_radians(self):
        assert to_radians(180) == pytest.approx(math.pi)
        assert to_radians(0) == 0

    def test_angle_to(self):
        assert angle_to(0, 0, 10, 0) == pytest.approx(0)
        assert angle_to(0, 0, 0, 10) == pytest.approx(90)
        assert angle_to(0, 0, -10, 0) == pytest.approx(180)

    def test_normalize(self):
        assert normalize(3, 4) == pytest.approx((0.6, 0.8))

    def test_normalize_zero(self):
        assert normalize(0, 0) == (0.0, 0.0)

    def test_circles_overlap(self):
        a, b = Bullet(0, 0, 0), Bullet(9, 0, 0)
        assert circle_collision(a, b, 5, 5)

    def test_touching_circles_do_not_collide(self):
        a, b = Bullet(0, 0, 0), Bullet(10, 0, 0)
        assert not circle_collision(a, b, 5, 5)

    def test_rects_overlap(self):
        assert rect_collision(0, 0, 10, 10, 9, 9, 10, 10)

    def test_touching_rects_do_not_collide(self):
        assert not rect_collision(0, 0, 10, 10, 10, 0, 10, 10)
        assert not rect_collision(0, 0, 10, 10, 0, 10, 10, 10)

    def test_level_scaling(self):
        assert enemy_count_for_level(1) == 4
        assert enemy_max_hp_for_level(1) == 60
        assert wall_count_for_level(1) == 17
        assert enemy_count_for_level(5) == 8
        assert enemy_max_hp_for_level(5) == 100
        assert wall_count_for_level(5) == 25


# ── Tank: damage ───────────────────────────────────────────────────────────


class TestTankDamage:
    def test_non_lethal_damage(self):
        tank = Tank(100, 100)
        assert tank.take_damage(30) is False
        assert tank.hp == 70

    def test_lethal_damage_clamps_to_zero(self):
        tank = Tank(100, 100)
        assert tank.take_damage(250) is True
        assert tank.hp == 0
        assert tank.is_dead

    def test_hp_stays_in_range(self):
        tank = Tank(100, 100)
        for amount in (10, 45, 3, 80, 20):
            dead = tank.take_damage(amount)
            assert 0 <= tank.hp <= tank.max_hp
            assert dead == (tank.hp == 0)

    def test_heal_capped(self):
        tank = Tank(100, 100, hp=90)
        tank.heal(30)
        assert tank.hp == tank.max_hp

    def test_hp_ratio(self):
        tank = Tank(100, 100, hp=25, max_hp=50)
        assert tank.hp_ratio == 0.5


# ── Tank: movement ─────────────────────────────────────────────────────────


class TestTankMovement:
    def test_free_move(self):
        tank = Tank(100, 100)
        assert tank.move(1, 0, [], []) is True
        assert (tank.x, tank.y) == (100 + TANK_SPEED, 100)

    def test_zero_direction_keeps_position(self):
        tank = Tank(100, 100)
        tank.move(0, 0, [], [])
        assert (tank.x, tank.y) == (100, 100)

    def test_blocked_by_arena_edge(self):
        tank = Tank(22, 300)
        assert tank.move(-1, 0, [], []) is False
        assert tank.x == 22

    def test_arena_edge_is_exclusive(self):
        # Hull would end exactly on x == 0
        tank = Tank(20 + TANK_SPEED, 300)
        assert tank.move(-1, 0, [], []) is False
        assert tank.x == 20 + TANK_SPEED

    def test_blocked_by_far_edges(self):
        tank = Tank(ARENA_WIDTH - 21, ARENA_HEIGHT - 21)
        assert tank.move(1, 0, [], []) is False
        assert tank.move(0, 1, [], []) is False
        assert (tank.x, tank.y) == (ARENA_WIDTH - 21, ARENA_HEIGHT - 21)

    def test_blocked_by_wall(self):
        tank = Tank(100, 100)
        wall = Wall(121, 80)
        assert tank.move(1, 0, [wall], []) is False
        assert tank.x == 100

    def test_no_sliding_along_free_axis(self):
        tank = Tank(100, 100)
        wall = Wall(121, 80)
        tank.move(math.sqrt(0.5), math.sqrt(0.5), [wall], [])
        assert (tank.x, tank.y) == (100, 100)

    def test_blocked_by_other_tank(self):
        tank = Tank(100, 100)
        other = Tank(140, 100)
        assert tank.move(1, 0, [], [other]) is False
        assert tank.x == 100

    def test_ignores_itself(self):
        tank = Tank(100, 100)
        assert tank.move(1, 0, [], [tank]) is True

    def test_aim_at(self):
        tank = Tank(100, 100)
        tank.aim_at(100, 200)
        assert tank.angle == pytest.approx(90)


# ── Tank: shooting ─────────────────────────────────────────────────────────


class TestTankShooting:
    def test_default_cooldowns(self):
        assert Tank(0, 0, is_player=True).shoot_cooldown == PLAYER_SHOOT_COOLDOWN
        assert Tank(0, 0).shoot_cooldown == ENEMY_SHOOT_COOLDOWN

    def test_first_shot_allowed(self):
        tank = Tank(100, 100, is_player=True)
        assert tank.shoot(0) is not None

    def test_cooldown_blocks_second_shot(self):
        tank = Tank(100, 100, is_player=True)
        shots = [tank.shoot(0), tank.shoot(100)]
        assert sum(s is not None for s in shots) == 1
        assert tank.shoot(PLAYER_SHOOT_COOLDOWN) is not None

    def test_failed_shot_keeps_timestamp(self):
        tank = Tank(100, 100, is_player=True)
        tank.shoot(0)
        tank.shoot(100)
        assert tank.last_shoot_time == 0

    def test_muzzle_position(self):
        tank = Tank(100, 100, is_player=True)
        bullet = tank.shoot(0)
        assert bullet.x == pytest.approx(130)
        assert bullet.y == pytest.approx(100)
        assert bullet.is_player is True

    def test_target_angle_override(self):
        tank = Tank(100, 100)
        bullet = tank.shoot(0, target_angle=90)
        assert bullet.angle == 90
        assert bullet.x == pytest.approx(100)
        assert bullet.y == pytest.approx(130)
        assert bullet.is_player is False


# ── Tank: AI ───────────────────────────────────────────────────────────────


class TestTankAI:
    def test_player_tank_ignores_ai(self, scripted_rng):
        player = Tank(100, 100, is_player=True)
        assert player.update_ai(player, [], [], 16, 0, scripted_rng(0.0)) is None
        assert (player.x, player.y) == (100, 100)

    def test_turret_tracks_player(self, scripted_rng):
        enemy = Tank(100, 100, ai_direction=0)
        player = Tank(100, 300, is_player=True)
        enemy.update_ai(player, [], [enemy], 16, 0, scripted_rng(0.5))
        assert enemy.angle == pytest.approx(90)

    def test_moves_along_ai_direction(self, scripted_rng):
        enemy = Tank(100, 100, ai_direction=0)
        player = Tank(100, 300, is_player=True)
        enemy.update_ai(player, [], [enemy], 16, 0, scripted_rng(0.5))
        assert enemy.x == pytest.approx(100 + TANK_SPEED)
        assert enemy.y == pytest.approx(100)

    def test_direction_change_after_interval(self, scripted_rng):
        enemy = Tank(100, 100, ai_direction=0, ai_change_interval=1000)
        player = Tank(700, 500, is_player=True)
        enemy.update_ai(player, [], [enemy], 1001, 0, scripted_rng(0.25))
        assert enemy.ai_timer == 0
        assert enemy.ai_direction == pytest.approx(90)
        assert enemy.ai_change_interval == pytest.approx(1500)
        assert enemy.y == pytest.approx(100 + TANK_SPEED)

    def test_timer_accumulates(self, scripted_rng):
        enemy = Tank(100, 100, ai_change_interval=1000)
        player = Tank(700, 500, is_player=True)
        for _ in range(3):
            enemy.update_ai(player, [], [enemy], 100, 0, scripted_rng(0.5))
        assert enemy.ai_timer == 300

    def test_fires_in_range_on_lucky_roll(self, scripted_rng):
        enemy = Tank(100, 100, ai_direction=0)
        player = Tank(400, 100, is_player=True)
        bullet = enemy.update_ai(player, [], [enemy], 16, 0, scripted_rng(0.0))
        assert bullet is not None
        assert bullet.is_player is False
        assert bullet.angle == pytest.approx(0)

    def test_fire_gated_by_cooldown_clock(self, scripted_rng):
        enemy = Tank(100, 100, speed=0)
        player = Tank(300, 100, is_player=True)
        rng = scripted_rng(0.0)
        shots = 0
        for tick in range(500):
            if enemy.update_ai(player, [], [enemy], 16, tick * 16, rng) is not None:
                shots += 1
        # 8 s of play with a 2 s cooldown
        assert shots == 4

    def test_no_fire_on_unlucky_roll(self, scripted_rng):
        enemy = Tank(100, 100)
        player = Tank(400, 100, is_player=True)
        assert enemy.update_ai(player, [], [enemy], 16, 0, scripted_rng(0.5)) is None

    def test_no_fire_out_of_range(self, scripted_rng):
        enemy = Tank(50, 50, speed=0)
        player = Tank(750, 550, is_player=True)
        assert enemy.update_ai(player, [], [enemy], 16, 0, scripted_rng(0.0)) is None

    def test_spawn_enemy(self, scripted_rng):
        enemy = Tank.spawn_enemy(300, 200, 70, scripted_rng(0.5))
        assert enemy.hp == enemy.max_hp == 70
        assert enemy.is_player is False
        assert enemy.ai_direction == pytest.approx(180)
        assert enemy.ai_change_interval == pytest.approx(2000)


# ── Bullet ─────────────────────────────────────────────────────────────────


class TestBullet:
    def test_velocity_from_angle(self):
        bullet = Bullet(100, 100, 90)
        assert bullet.vx == pytest.approx(0, abs=1e-9)
        assert bullet.vy == pytest.approx(BULLET_SPEED)

    def test_update_moves(self):
        bullet = Bullet(100, 100, 0)
        bullet.update()
        assert (bullet.x, bullet.y) == (100 + BULLET_SPEED, 100)
        assert bullet.is_active

    def test_velocity_constant(self):
        bullet = Bullet(100, 100, 30)
        vx, vy = bullet.vx, bullet.vy
        for _ in range(5):
            bullet.update()
        assert (bullet.vx, bullet.vy) == (vx, vy)

    def test_leaves_right_edge(self):
        bullet = Bullet(ARENA_WIDTH - 5, 300, 0)
        bullet.update()
        assert not bullet.is_active

    def test_on_edge_still_active(self):
        bullet = Bullet(ARENA_WIDTH - BULLET_SPEED, 300, 0)
        bullet.update()
        assert bullet.x == ARENA_WIDTH
        assert bullet.is_active

    def test_leaves_top_edge(self):
        bullet = Bullet(400, 3, 270)
        bullet.update()
        assert not bullet.is_active

    def test_stationary_bullet_stays_active(self):
        bullet = Bullet(400, 300, 0, speed=0)
        for _ in range(100):
            bullet.update()
        assert bullet.is_active

    def test_bounding_box(self):
        bullet = Bullet(100, 100, 0)
        assert bullet.bounding_box == (92, 92, 16, 16)


# ── Wall ───────────────────────────────────────────────────────────────────


class TestWall:
    def test_default_hp(self):
        assert Wall(0, 0, WallType.BRICK).hp == BRICK_WALL_HP
        assert Wall(0, 0, WallType.STEEL).hp == STEEL_WALL_HP

    def test_brick_accumulates_damage(self):
        wall = Wall(0, 0, WallType.BRICK)
        assert wall.take_damage(40) is False
        assert wall.hp == 10
        assert wall.take_damage(40) is True
        assert wall.is_destroyed

    def test_steel_is_indestructible(self):
        wall = Wall(0, 0, WallType.STEEL)
        for amount in (40, 10_000, 10**9):
            assert wall.take_damage(amount) is False
        assert wall.hp == STEEL_WALL_HP
        assert not wall.is_destroyed

    def test_center(self):
        assert Wall(40, 80).center == (60, 100)


# ── Particle ───────────────────────────────────────────────────────────────


class TestParticle:
    def test_burst_ranges(self, scripted_rng):
        p = Particle.burst(10, 20, scripted_rng(1.0, 0.0, 0.5, 0.0))
        assert (p.x, p.y) == (10, 20)
        assert p.vx == pytest.approx(5)
        assert p.vy == pytest.approx(-5)
        assert p.size == pytest.approx(5.5)
        assert p.life == 1

    def test_update_applies_gravity_and_fade(self):
        p = Particle(0, 0, vx=1, vy=0)
        p.update()
        assert (p.x, p.y) == (1, 0)
        assert p.vy == pytest.approx(0.2)
        assert p.life == pytest.approx(0.98)

    def test_dies_after_fading(self):
        p = Particle(0, 0)
        for _ in range(51):
            p.update()
        assert p.is_dead

    def test_hue_to_rgb(self):
        assert hue_to_rgb(0) == (255, 0, 0)
        assert hue_to_rgb(120) == (0, 255, 0)
