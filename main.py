"""
Main entry point for the Jazz HUD viewer.

Initializes pygame, runs a 60Hz loop, and draws the vitals HUD (heart
row, score, level) for a single game.

Usage:
    python main.py [OPTIONS]

Options:
    --fullscreen         Launch in fullscreen mode
    --scale N            Display scale multiplier (1-4, default: 2)
    --lives N            Starting lives (default: 3)
    --steps N            Hits per heart (default: 4)
    --debug              Debug keys (H hit, J heal, Enter start) and
                         verbose logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from jazz.config import (
    COLOR_BACKGROUND,
    DAMAGE_STEPS,
    DEFAULT_LIVES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    UPDATE_RATE,
)
from jazz.game import Game

logger = logging.getLogger(__name__)


# ── Constants ───────────────────────────────────────────────────────────────

DEFAULT_SCALE: int = 2
MIN_SCALE: int = 1
MAX_SCALE: int = 4


# ── Argument parsing ───────────────────────────────────────────────────────


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a value >= 1, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a value >= 0, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Jazz the Cat in the Hat - vitals HUD viewer",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--scale", type=int, default=DEFAULT_SCALE,
        choices=range(MIN_SCALE, MAX_SCALE + 1),
        metavar="N",
        help=f"Display scale multiplier ({MIN_SCALE}-{MAX_SCALE}, default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--lives", type=_non_negative_int, default=DEFAULT_LIVES,
        metavar="N",
        help=f"Starting lives (default: {DEFAULT_LIVES})",
    )
    parser.add_argument(
        "--steps", type=_positive_int, default=DAMAGE_STEPS,
        metavar="N",
        help=f"Hits needed to empty one heart (default: {DAMAGE_STEPS})",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug keys (H hit, J heal, Enter start) and verbose logging",
    )
    return parser.parse_args(argv)


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class JazzApp:
    """Top-level application wrapper.

    Owns the pygame display, the game, and the main loop.
    """

    scale: int = DEFAULT_SCALE
    fullscreen: bool = False
    debug: bool = False
    start_lives: int = DEFAULT_LIVES
    steps: int = DAMAGE_STEPS

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    game: Game | None = None
    running: bool = False

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        if pygame is None:
            print("Error: pygame is required. Install with: pip install pygame",
                  file=sys.stderr)
            return False

        try:
            pygame.init()
        except Exception as exc:
            print(f"Error initialising pygame: {exc}", file=sys.stderr)
            return False

        flags = 0
        if self.fullscreen:
            flags |= pygame.FULLSCREEN

        try:
            self.screen = pygame.display.set_mode(
                (SCREEN_WIDTH * self.scale, SCREEN_HEIGHT * self.scale), flags,
            )
        except Exception as exc:
            print(f"Error creating display: {exc}", file=sys.stderr)
            pygame.quit()
            return False

        pygame.display.set_caption("Jazz the Cat in the Hat")
        self.clock = pygame.time.Clock()

        self.game = self.build_game()
        self.running = True
        return True

    def build_game(self) -> Game:
        """Create the game and run its first HUD sync."""
        from jazz.ui.hearts import PygameHud

        game = Game(hud=PygameHud(scale=self.scale), steps=self.steps)
        game.init()
        if self.start_lives != game.state.lives:
            game.state.lives = self.start_lives
            game.sync()
        return game

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main loop at 60 FPS."""
        if not self.running:
            return

        try:
            while self.running:
                self._handle_events()
                self._render()
                self.clock.tick(UPDATE_RATE)
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Process pygame events.

        ESC or closing the window quits.  With ``--debug``:
            H     – hit
            J     – heal
            Enter – start
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif self.debug:
                    self._handle_debug_key(event.key)

    def _handle_debug_key(self, key: int) -> None:
        if key == pygame.K_h:
            self.game.hit()
        elif key == pygame.K_j:
            self.game.heal()
        elif key == pygame.K_RETURN:
            self.game.start()

    # ── Rendering ───────────────────────────────────────────────────────

    def _render(self) -> None:
        if self.screen is None:
            return
        self.screen.fill(COLOR_BACKGROUND)
        self.game.hud.draw(self.screen)
        pygame.display.flip()

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        if pygame is not None:
            try:
                pygame.quit()
            except Exception:
                logger.exception("pygame.quit failed")


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    app = JazzApp(
        scale=args.scale,
        fullscreen=args.fullscreen,
        debug=args.debug,
        start_lives=args.lives,
        steps=args.steps,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
