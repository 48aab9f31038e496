"""
Tests for the presentation side: score display, HUD text, input
intents and the pygame renderer (drawn to an off-screen surface).
"""

import random

import pygame
import pytest

from tank_battle.config import (
    BULLET_SIZE,
    COLOR_GRID,
    COLOR_HP_GOOD,
    COLOR_HP_LOW,
    COLOR_HP_MID,
    COLOR_PLAYER_BULLET,
    JOYSTICK_DEAD_ZONE,
)
from tank_battle.game import Game
from tank_battle.snapshot import BulletView
from tank_battle.ui.renderer import (
    draw_bullet,
    draw_world,
    hp_bar_color,
    rotated_square,
)
from tank_battle.ui.text import HudText, ScoreDisplay
from tank_battle.utils.input_handler import InputIntent


# ── Score display ──────────────────────────────────────────────────────────


class TestScoreDisplay:
    def test_add(self):
        sd = ScoreDisplay()
        sd.add(100)
        assert sd.player_score == 100

    def test_high_score_updates(self):
        sd = ScoreDisplay(high_score=50)
        sd.add(100)
        assert sd.high_score == 100

    def test_high_score_persists_on_reset(self):
        sd = ScoreDisplay()
        sd.add(500)
        sd.reset()
        assert sd.player_score == 0
        assert sd.high_score == 500

    def test_format(self):
        sd = ScoreDisplay()
        sd.add(1200)
        assert sd.format_score() == "SCORE: 1200"
        assert sd.format_high_score() == "HIGH: 1200"


# ── HUD text ───────────────────────────────────────────────────────────────


class TestHudText:
    def test_running_hud(self):
        game = Game(rng=random.Random(2))
        hud = HudText.from_snapshot(game.snapshot())
        assert hud.health == "HP: 100"
        assert hud.health_percent == 100
        assert hud.level == "LEVEL: 1"
        assert hud.enemies_left == "ENEMIES: 4"
        assert hud.overlay_lines == ()

    def test_health_rounds_up(self):
        game = Game(rng=random.Random(2))
        game.player.hp = 79.5
        assert HudText.from_snapshot(game.snapshot()).health == "HP: 80"

    def test_paused_overlay(self):
        game = Game(rng=random.Random(2))
        game.toggle_pause()
        hud = HudText.from_snapshot(game.snapshot())
        assert hud.overlay_lines[0] == "PAUSED"

    def test_game_over_summary(self):
        game = Game(rng=random.Random(2), start_level=3)
        game.score_display.add(4200)
        game.game_over()
        lines = HudText.from_snapshot(game.snapshot()).overlay_lines
        assert lines[0] == "GAME OVER"
        assert "FINAL SCORE: 4200" in lines
        assert "FINAL LEVEL: 3" in lines

    def test_status_line(self):
        game = Game(rng=random.Random(2))
        line = HudText.from_snapshot(game.snapshot()).status_line
        assert "SCORE: 0" in line and "LEVEL: 1" in line


# ── Input intents ──────────────────────────────────────────────────────────


class TestInputIntent:
    def test_from_keys(self):
        intent = InputIntent.from_keys(up=True, right=True, aim=(10, 20))
        assert (intent.move_x, intent.move_y) == (1, -1)
        assert (intent.aim_x, intent.aim_y) == (10, 20)
        assert intent.heading is None

    def test_opposite_keys_cancel(self):
        intent = InputIntent.from_keys(left=True, right=True)
        assert intent.move_x == 0
        assert not intent.has_aim_point

    def test_joystick_dead_zone(self):
        intent = InputIntent.from_joystick(JOYSTICK_DEAD_ZONE / 2, 0, aim=(5, 5))
        assert (intent.move_x, intent.move_y) == (0, 0)
        assert intent.heading is None
        assert intent.has_aim_point

    def test_joystick_sets_heading(self):
        intent = InputIntent.from_joystick(0, 40)
        assert intent.move_x == pytest.approx(0)
        assert intent.move_y == pytest.approx(1)
        assert intent.heading == pytest.approx(90)


# ── Renderer ───────────────────────────────────────────────────────────────


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 22)
    pygame.font.quit()


class TestRenderer:
    def test_rotated_square_axis_aligned(self):
        corners = rotated_square(10, 10, 4, 0)
        assert corners == [(8, 8), (12, 8), (12, 12), (8, 12)]

    def test_hp_bar_color_tiers(self):
        assert hp_bar_color(0.9) == COLOR_HP_GOOD
        assert hp_bar_color(0.5) == COLOR_HP_MID
        assert hp_bar_color(0.3) == COLOR_HP_MID
        assert hp_bar_color(0.25) == COLOR_HP_LOW
        assert hp_bar_color(0.1) == COLOR_HP_LOW

    def test_bullet_drawn_at_hit_radius(self):
        surface = pygame.Surface((40, 40))
        draw_bullet(surface, BulletView(20, 20, BULLET_SIZE, True))
        assert tuple(surface.get_at((20 + 5, 20)))[:3] == COLOR_PLAYER_BULLET
        assert tuple(surface.get_at((20 + BULLET_SIZE + 2, 20)))[:3] == (0, 0, 0)

    def test_draw_world(self, font):
        game = Game(rng=random.Random(9))
        game.walls = []
        game.create_explosion(600, 500)
        surface = pygame.Surface((800, 600))
        draw_world(surface, font, game.snapshot(), aim=(100, 100))
        assert tuple(surface.get_at((0, 300)))[:3] == COLOR_GRID

    def test_draw_overlay(self, font):
        game = Game(rng=random.Random(9))
        game.game_over()
        surface = pygame.Surface((800, 600))
        draw_world(surface, font, game.snapshot())
