"""
Main entry point for Tank Battle.

Initializes pygame, runs the frame loop, turns keyboard / mouse /
gamepad state into input intents for the simulation and draws each
frame from the game's snapshot.

Usage:
    python tank-battle.py [OPTIONS]

Options:
    --fullscreen         Launch in fullscreen mode
    --debug              Enable debug overlay and debug logging
    --level N            Start at a specific level (testing)
    --seed N             Seed the random source for a reproducible game
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass, field
from typing import Optional

import pygame

from tank_battle.config import ARENA_HEIGHT, ARENA_WIDTH, UPDATE_RATE
from tank_battle.game import Game, GameEvent, GameState
from tank_battle.ui.renderer import draw_world
from tank_battle.utils.input_handler import GameAction, InputIntent

logger = logging.getLogger("tank_battle")


# ── Constants ───────────────────────────────────────────────────────────────

FRAME_TIME: float = 1.0 / UPDATE_RATE          # ~16.67 ms
MAX_FRAME_MS: float = 250.0                     # clamp after a stall
GAMEPAD_RANGE: float = 50.0                     # stick deflection -> units
FONT_SIZE: int = 22

KEY_ACTIONS: dict[int, GameAction] = {
    pygame.K_p: GameAction.PAUSE,
    pygame.K_r: GameAction.RESTART,
    pygame.K_SPACE: GameAction.FIRE,
    pygame.K_ESCAPE: GameAction.QUIT,
}


# ── Argument parsing ───────────────────────────────────────────────────────


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Tank Battle – top-down arcade tank combat",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug overlay (FPS, entity counts) and debug logging",
    )
    parser.add_argument(
        "--level", type=positive_int, default=1,
        metavar="N",
        help="Start at specific level (for testing)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        metavar="N",
        help="Random seed for a reproducible game",
    )
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class TankBattleApp:
    """Top-level application wrapper.

    Owns the pygame display, the game and the main loop.
    """

    fullscreen: bool = False
    debug: bool = False
    start_level: int = 1
    seed: Optional[int] = None

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    font: object = field(default=None, repr=False)
    gamepad: object = field(default=None, repr=False)
    game: Game = field(init=False)
    running: bool = False

    # Pointer position in arena coordinates
    mouse_x: int = ARENA_WIDTH // 2
    mouse_y: int = ARENA_HEIGHT // 2

    # Performance tracking
    frame_times: list[float] = field(default_factory=list)
    fps: float = 0.0

    def __post_init__(self) -> None:
        self.game = Game(rng=random.Random(self.seed), start_level=self.start_level)

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        try:
            pygame.init()
        except Exception as exc:
            print(f"Error initialising pygame: {exc}", file=sys.stderr)
            return False

        flags = pygame.FULLSCREEN if self.fullscreen else 0
        try:
            self.screen = pygame.display.set_mode((ARENA_WIDTH, ARENA_HEIGHT), flags)
        except Exception as exc:
            print(f"Error creating display: {exc}", file=sys.stderr)
            pygame.quit()
            return False

        pygame.display.set_caption("Tank Battle")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, FONT_SIZE)
        if pygame.joystick.get_count() > 0:
            self.gamepad = pygame.joystick.Joystick(0)
            logger.info("Using gamepad %s", self.gamepad.get_name())

        self.running = True
        logger.info("Game started at level %d", self.game.level)
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main game loop at 60 FPS."""
        if not self.running:
            return

        try:
            while self.running:
                frame_start = time.perf_counter()
                delta_ms = min(self.clock.tick(UPDATE_RATE), MAX_FRAME_MS)

                intent = self._read_intent()
                self._handle_events(intent)
                self._update(delta_ms, intent)
                self._render(intent)

                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                if len(self.frame_times) > UPDATE_RATE:
                    self.frame_times.pop(0)
                avg = sum(self.frame_times) / len(self.frame_times)
                self.fps = 1.0 / avg if avg > 0 else 0.0
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Input ───────────────────────────────────────────────────────────

    def _aim_point(self) -> tuple[int, int]:
        return (self.mouse_x, self.mouse_y)

    def _read_intent(self) -> InputIntent:
        """Build this frame's movement/aim intent from held input."""
        if self.gamepad is not None:
            dx = self.gamepad.get_axis(0) * GAMEPAD_RANGE
            dy = self.gamepad.get_axis(1) * GAMEPAD_RANGE
            intent = InputIntent.from_joystick(dx, dy, aim=self._aim_point())
            if intent.heading is not None:
                return intent

        keys = pygame.key.get_pressed()
        return InputIntent.from_keys(
            up=keys[pygame.K_w] or keys[pygame.K_UP],
            down=keys[pygame.K_s] or keys[pygame.K_DOWN],
            left=keys[pygame.K_a] or keys[pygame.K_LEFT],
            right=keys[pygame.K_d] or keys[pygame.K_RIGHT],
            aim=self._aim_point(),
        )

    def dispatch(self, action: GameAction, intent: Optional[InputIntent] = None) -> None:
        """Route a discrete action to the game (QUIT stops the app)."""
        if action == GameAction.QUIT:
            self.running = False
        elif action != GameAction.NONE:
            self.game.handle_action(action, intent)

    def _handle_events(self, intent: InputIntent) -> None:
        """Process pygame events.

        Controls:
            WASD / arrows  – move
            Mouse          – aim
            Left click     – fire towards the pointer
            Space          – fire along the current heading
            P              – pause / unpause
            R              – restart
            ESC            – exit game
            Gamepad        – left stick moves and aims, button 0 fires
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.MOUSEMOTION:
                self.mouse_x, self.mouse_y = event.pos

            elif event.type == pygame.KEYDOWN:
                action = KEY_ACTIONS.get(event.key, GameAction.NONE)
                # Space fires straight ahead, not at the pointer
                self.dispatch(action, None if action == GameAction.FIRE else intent)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.mouse_x, self.mouse_y = event.pos
                self.dispatch(
                    GameAction.FIRE,
                    InputIntent(aim_x=event.pos[0], aim_y=event.pos[1]),
                )

            elif event.type == pygame.JOYBUTTONDOWN and event.button == 0:
                self.dispatch(GameAction.FIRE, None)

    # ── Game logic update ───────────────────────────────────────────────

    def _update(self, delta_ms: float, intent: InputIntent) -> None:
        """Run one frame of game logic and log notable events."""
        self.game.update(delta_ms, intent)
        for event in self.game.drain_events():
            if event == GameEvent.GAME_OVER:
                logger.info(
                    "Final score %d on level %d",
                    self.game.score, self.game.level,
                )
            elif event == GameEvent.LEVEL_COMPLETE:
                logger.debug("Entering level %d", self.game.level)

    # ── Rendering ───────────────────────────────────────────────────────

    def _aim_line_target(
        self, intent: Optional[InputIntent] = None
    ) -> Optional[tuple[int, int]]:
        """Pointer to draw the aim line to, or None while the stick steers."""
        if self.game.state != GameState.RUNNING:
            return None
        if intent is not None and intent.heading is not None:
            return None
        return self._aim_point()

    def _render(self, intent: Optional[InputIntent] = None) -> None:
        """Execute the rendering pipeline."""
        if self.screen is None:
            return

        aim = self._aim_line_target(intent)
        draw_world(self.screen, self.font, self.game.snapshot(), aim)

        if self.debug:
            self._render_debug()

        pygame.display.flip()

    def _render_debug(self) -> None:
        """Draw debug overlay (FPS, entity counts)."""
        texts = [
            f"FPS: {self.fps:.1f}",
            f"Bullets: {len(self.game.bullets)}",
            f"Particles: {len(self.game.particles)}",
            f"Walls: {len(self.game.walls)}",
            f"Clock: {self.game.clock_ms / 1000:.1f}s",
        ]
        y = ARENA_HEIGHT - 18 * len(texts) - 5
        for text in texts:
            surface = self.font.render(text, True, (0, 255, 0))
            self.screen.blit(surface, (5, y))
            y += 18

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    configure_logging(args.debug)

    app = TankBattleApp(
        fullscreen=args.fullscreen,
        debug=args.debug,
        start_level=args.level,
        seed=args.seed,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
