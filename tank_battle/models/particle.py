"""
Explosion particles for Tank Battle.

Particles are purely cosmetic: they fly out of an explosion, fall under
a little gravity and fade out.  Nothing in the simulation reads them.
"""

from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass

from tank_battle.config import (
    PARTICLE_FADE,
    PARTICLE_GRAVITY,
    PARTICLE_HUE_MIN,
    PARTICLE_HUE_SPAN,
    PARTICLE_MIN_SIZE,
    PARTICLE_SIZE_SPAN,
    PARTICLE_SPREAD,
)


def hue_to_rgb(hue: float) -> tuple[int, int, int]:
    """Convert a hue in degrees to a fully saturated, mid-lightness RGB."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, 0.5, 1.0)
    return (round(r * 255), round(g * 255), round(b * 255))


@dataclass
class Particle:
    """A single spark of an explosion.

    ``life`` starts at 1 and drops by a fixed amount each tick; the
    renderer uses it as the alpha value.
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    life: float = 1.0
    size: float = PARTICLE_MIN_SIZE
    color: tuple[int, int, int] = (255, 128, 0)

    @classmethod
    def burst(cls, x: float, y: float, rng: random.Random) -> "Particle":
        """Create a particle at (*x*, *y*) with randomized motion and colour."""
        return cls(
            x=x,
            y=y,
            vx=(rng.random() - 0.5) * PARTICLE_SPREAD,
            vy=(rng.random() - 0.5) * PARTICLE_SPREAD,
            size=rng.random() * PARTICLE_SIZE_SPAN + PARTICLE_MIN_SIZE,
            color=hue_to_rgb(rng.random() * PARTICLE_HUE_SPAN + PARTICLE_HUE_MIN),
        )

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= PARTICLE_FADE

    @property
    def is_dead(self) -> bool:
        return self.life <= 0
