"""
pygame renderer for Tank Battle.

Draws a ``WorldSnapshot`` onto a surface.  Nothing here touches the
simulation; it only reads the frozen views.
"""

from __future__ import annotations

import math
from typing import Optional

import pygame

from tank_battle.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    COLOR_AIM_LINE,
    COLOR_BACKGROUND,
    COLOR_BARREL,
    COLOR_BRICK,
    COLOR_BRICK_MORTAR,
    COLOR_ENEMY,
    COLOR_ENEMY_BULLET,
    COLOR_ENEMY_OUTLINE,
    COLOR_GRID,
    COLOR_HP_BACK,
    COLOR_HP_GOOD,
    COLOR_HP_LOW,
    COLOR_HP_MID,
    COLOR_PLAYER,
    COLOR_PLAYER_BULLET,
    COLOR_PLAYER_OUTLINE,
    COLOR_STEEL,
    COLOR_STEEL_OUTLINE,
    COLOR_STEEL_RIVET,
    COLOR_TEXT,
    GRID_SPACING,
)
from tank_battle.models.wall import WallType
from tank_battle.snapshot import (
    BulletView,
    ParticleView,
    TankView,
    WallView,
    WorldSnapshot,
)
from tank_battle.ui.text import HudText
from tank_battle.utils.functions import to_radians

HP_BAR_HEIGHT: int = 5
HP_BAR_OFFSET: int = 15
HP_GOOD_RATIO: float = 0.5
HP_MID_RATIO: float = 0.25
BARREL_WIDTH: int = 8
AIM_DASH: int = 5


def rotated_square(
    cx: float, cy: float, size: float, angle: float
) -> list[tuple[float, float]]:
    """Corners of a square of edge *size* centred at (cx, cy), rotated."""
    half = size / 2
    cos_a = math.cos(to_radians(angle))
    sin_a = math.sin(to_radians(angle))
    corners = [(-half, -half), (half, -half), (half, half), (-half, half)]
    return [
        (cx + px * cos_a - py * sin_a, cy + px * sin_a + py * cos_a)
        for px, py in corners
    ]


def hp_bar_color(ratio: float) -> tuple[int, int, int]:
    if ratio > HP_GOOD_RATIO:
        return COLOR_HP_GOOD
    if ratio > HP_MID_RATIO:
        return COLOR_HP_MID
    return COLOR_HP_LOW


# ── Entity drawing ──────────────────────────────────────────────────────────


def draw_grid(surface: pygame.Surface) -> None:
    for x in range(0, ARENA_WIDTH, GRID_SPACING):
        pygame.draw.line(surface, COLOR_GRID, (x, 0), (x, ARENA_HEIGHT))
    for y in range(0, ARENA_HEIGHT, GRID_SPACING):
        pygame.draw.line(surface, COLOR_GRID, (0, y), (ARENA_WIDTH, y))


def draw_wall(surface: pygame.Surface, wall: WallView) -> None:
    rect = pygame.Rect(int(wall.x), int(wall.y), int(wall.width), int(wall.height))
    if wall.wall_type is WallType.BRICK:
        pygame.draw.rect(surface, COLOR_BRICK, rect)
        pygame.draw.rect(surface, COLOR_BRICK_MORTAR, rect, 2)
        mid_y = rect.top + rect.height // 2
        pygame.draw.line(surface, COLOR_BRICK_MORTAR, (rect.left, mid_y), (rect.right, mid_y))
    else:
        pygame.draw.rect(surface, COLOR_STEEL, rect)
        pygame.draw.rect(surface, COLOR_STEEL_OUTLINE, rect, 3)
        for i in range(3):
            x = rect.left + i * rect.width // 3
            pygame.draw.line(surface, COLOR_STEEL_RIVET, (x, rect.top), (x, rect.bottom))


def draw_bullet(surface: pygame.Surface, bullet: BulletView) -> None:
    color = COLOR_PLAYER_BULLET if bullet.is_player else COLOR_ENEMY_BULLET
    center = (int(bullet.x), int(bullet.y))
    pygame.draw.circle(surface, color, center, int(bullet.size))
    pygame.draw.circle(surface, COLOR_TEXT, center, int(bullet.size), 2)


def draw_particle(surface: pygame.Surface, particle: ParticleView) -> None:
    radius = max(int(particle.size), 1)
    spark = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    alpha = int(max(min(particle.life, 1.0), 0.0) * 255)
    pygame.draw.circle(spark, (*particle.color, alpha), (radius, radius), radius)
    surface.blit(spark, (int(particle.x) - radius, int(particle.y) - radius))


def draw_tank(surface: pygame.Surface, tank: TankView) -> None:
    body, outline = (
        (COLOR_PLAYER, COLOR_PLAYER_OUTLINE) if tank.is_player
        else (COLOR_ENEMY, COLOR_ENEMY_OUTLINE)
    )
    hull = rotated_square(tank.x, tank.y, tank.size, tank.angle)
    pygame.draw.polygon(surface, body, hull)
    pygame.draw.polygon(surface, outline, hull, 3)

    barrel_len = tank.size / 2 + 10
    tip = (
        tank.x + math.cos(to_radians(tank.angle)) * barrel_len,
        tank.y + math.sin(to_radians(tank.angle)) * barrel_len,
    )
    pygame.draw.line(surface, COLOR_BARREL, (tank.x, tank.y), tip, BARREL_WIDTH)
    pygame.draw.circle(surface, outline, (int(tank.x), int(tank.y)), int(tank.size / 6))

    if not tank.is_player:
        draw_hp_bar(surface, tank)


def draw_hp_bar(surface: pygame.Surface, tank: TankView) -> None:
    width = int(tank.size)
    x = int(tank.x - tank.size / 2)
    y = int(tank.y - tank.size / 2 - HP_BAR_OFFSET)
    pygame.draw.rect(surface, COLOR_HP_BACK, (x, y, width, HP_BAR_HEIGHT))
    filled = int(width * max(tank.hp_ratio, 0.0))
    pygame.draw.rect(surface, hp_bar_color(tank.hp_ratio), (x, y, filled, HP_BAR_HEIGHT))
    pygame.draw.rect(surface, COLOR_TEXT, (x, y, width, HP_BAR_HEIGHT), 1)


def draw_aim_line(
    surface: pygame.Surface, player: TankView, target: tuple[int, int]
) -> None:
    """Dashed line from the player to the pointer."""
    dx = target[0] - player.x
    dy = target[1] - player.y
    length = math.hypot(dx, dy)
    if length == 0:
        return
    ux, uy = dx / length, dy / length
    pos = 0.0
    while pos < length:
        end = min(pos + AIM_DASH, length)
        pygame.draw.line(
            surface, COLOR_AIM_LINE,
            (player.x + ux * pos, player.y + uy * pos),
            (player.x + ux * end, player.y + uy * end),
            2,
        )
        pos += AIM_DASH * 2


# ── HUD / overlays ──────────────────────────────────────────────────────────


def draw_hud(
    surface: pygame.Surface, font: pygame.font.Font, hud: HudText
) -> None:
    bar_width = 150
    pygame.draw.rect(surface, COLOR_HP_BACK, (10, 10, bar_width, 12))
    ratio = hud.health_percent / 100
    pygame.draw.rect(surface, hp_bar_color(ratio), (10, 10, int(bar_width * ratio), 12))
    text = font.render(hud.status_line, True, COLOR_TEXT)
    surface.blit(text, (10 + bar_width + 10, 6))


def draw_overlay(
    surface: pygame.Surface, font: pygame.font.Font, lines: tuple[str, ...]
) -> None:
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 160))
    surface.blit(shade, (0, 0))

    rendered = [font.render(line, True, COLOR_TEXT) for line in lines]
    total = sum(r.get_height() + 8 for r in rendered)
    y = surface.get_height() // 2 - total // 2
    for r in rendered:
        surface.blit(r, (surface.get_width() // 2 - r.get_width() // 2, y))
        y += r.get_height() + 8


def draw_world(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snapshot: WorldSnapshot,
    aim: Optional[tuple[int, int]] = None,
) -> None:
    """Draw a full frame: arena, entities, HUD and any overlay."""
    surface.fill(COLOR_BACKGROUND)
    draw_grid(surface)

    for wall in snapshot.walls:
        draw_wall(surface, wall)
    for bullet in snapshot.bullets:
        draw_bullet(surface, bullet)
    for particle in snapshot.particles:
        draw_particle(surface, particle)
    for enemy in snapshot.enemies:
        draw_tank(surface, enemy)
    draw_tank(surface, snapshot.player)

    if aim is not None:
        draw_aim_line(surface, snapshot.player, aim)

    hud = HudText.from_snapshot(snapshot)
    draw_hud(surface, font, hud)
    if hud.overlay_lines:
        draw_overlay(surface, font, hud.overlay_lines)
