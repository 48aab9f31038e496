"""
UI text utilities for Tank Battle.

Score bookkeeping plus the strings shown in the HUD bar and on the
pause / game-over overlays.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tank_battle.snapshot import WorldSnapshot


@dataclass
class ScoreDisplay:
    """Tracks the player score and the best score of this session."""

    player_score: int = 0
    high_score: int = 0

    def add(self, points: int) -> None:
        """Add *points* to the player score and update high score."""
        self.player_score += points
        if self.player_score > self.high_score:
            self.high_score = self.player_score

    def reset(self) -> None:
        """Reset player score (high score persists)."""
        self.player_score = 0

    def format_score(self) -> str:
        return f"SCORE: {self.player_score}"

    def format_high_score(self) -> str:
        return f"HIGH: {self.high_score}"


@dataclass(frozen=True)
class HudText:
    """Pre-formatted HUD strings for one frame."""

    health: str
    health_percent: float
    score: str
    high_score: str
    level: str
    enemies_left: str
    overlay_lines: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_snapshot(cls, snapshot: "WorldSnapshot") -> "HudText":
        # Local import; game imports this module for ScoreDisplay.
        from tank_battle.game import GameState

        percent = (
            snapshot.hp / snapshot.max_hp * 100 if snapshot.max_hp else 0.0
        )
        if snapshot.state == GameState.PAUSED:
            overlay: tuple[str, ...] = ("PAUSED", "Press P to resume")
        elif snapshot.state == GameState.GAME_OVER:
            overlay = (
                "GAME OVER",
                "Your tank was destroyed!",
                f"FINAL SCORE: {snapshot.score}",
                f"FINAL LEVEL: {snapshot.level}",
                "Press R to restart",
            )
        else:
            overlay = ()

        return cls(
            health=f"HP: {math.ceil(snapshot.hp)}",
            health_percent=percent,
            score=f"SCORE: {snapshot.score}",
            high_score=f"HIGH: {snapshot.high_score}",
            level=f"LEVEL: {snapshot.level}",
            enemies_left=f"ENEMIES: {snapshot.enemies_left}",
            overlay_lines=overlay,
        )

    @property
    def status_line(self) -> str:
        return "   ".join(
            (self.health, self.score, self.level, self.enemies_left)
        )
