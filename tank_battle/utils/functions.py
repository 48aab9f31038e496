"""
Shared utility functions for Tank Battle.

Geometry helpers (distance, angles, overlap tests) used by every model,
plus the per-level scaling formulas used by wave generation.  All of
these are pure functions.
"""

from __future__ import annotations

import math
from typing import Any

from tank_battle.config import (
    BASE_ENEMY_COUNT,
    BASE_ENEMY_HP,
    BASE_WALL_COUNT,
    ENEMY_HP_PER_LEVEL,
    WALLS_PER_LEVEL,
)


# ── Geometry ────────────────────────────────────────────────────────────────


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def to_radians(angle: float) -> float:
    return angle * math.pi / 180


def angle_to(x1: float, y1: float, x2: float, y2: float) -> float:
    """Heading in degrees from (*x1*, *y1*) towards (*x2*, *y2*)."""
    return math.atan2(y2 - y1, x2 - x1) * 180 / math.pi


def normalize(dx: float, dy: float) -> tuple[float, float]:
    """Scale (*dx*, *dy*) to unit length.  A zero vector stays zero."""
    magnitude = math.hypot(dx, dy)
    if magnitude == 0:
        return (0.0, 0.0)
    return (dx / magnitude, dy / magnitude)


def circle_collision(a: Any, b: Any, r1: float, r2: float) -> bool:
    """Return True if circles around *a* and *b* overlap.

    *a* and *b* are anything with ``x`` and ``y`` attributes.  Touching
    circles (distance exactly ``r1 + r2``) do not collide.
    """
    return distance(a.x, a.y, b.x, b.y) < r1 + r2


def rect_collision(
    x1: float, y1: float, w1: float, h1: float,
    x2: float, y2: float, w2: float, h2: float,
) -> bool:
    """Axis-aligned rectangle overlap; shared edges do not collide."""
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


# ── Level scaling ───────────────────────────────────────────────────────────


def enemy_count_for_level(level: int) -> int:
    return BASE_ENEMY_COUNT + level


def enemy_max_hp_for_level(level: int) -> int:
    return BASE_ENEMY_HP + level * ENEMY_HP_PER_LEVEL


def wall_count_for_level(level: int) -> int:
    return BASE_WALL_COUNT + level * WALLS_PER_LEVEL
