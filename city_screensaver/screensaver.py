"""
City Screensaver - night-time cityscape for the terminal.

Buildings with flickering windows, traffic on a two-lane street, a moon and
twinkling stars, optionally under rain or snow. Any key exits.

Usage:
    city-screensaver
    city-screensaver --rain --vehicles 8
    city-screensaver --snow --seed 42
"""

import argparse
import locale
import logging
import random
import sys
import time
from typing import Callable, List, Optional

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .colors import Colors
from .config import ScreensaverConfig
from .errors import (
    EXIT_OK,
    EXIT_TERMINAL_ERROR,
    EXIT_USAGE,
    ConfigError,
    ScreensaverError,
    TerminalSetupError,
)
from .generator import generate_scene
from .models import Scene
from .renderer import compose_frame, draw_frame
from .simulation import step_scene

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# getch() result when no key is waiting
NO_KEY = -1


class Screensaver:
    """
    Single-threaded render loop.

    Each iteration polls for a key without blocking, advances the scene one
    step, draws a full frame and sleeps off the rest of the frame interval.
    The first keypress ends the loop.
    """

    def __init__(self, config: Optional[ScreensaverConfig] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.config = config or ScreensaverConfig()
        self.rng = rng or random.Random(self.config.seed)
        self._clock = clock
        self._sleep = sleep
        self.running = False
        self.screen = None
        self.scene: Optional[Scene] = None
        self.frames = 0

        # Layout
        self.height = 0
        self.width = 0

    def run(self):
        """Take over the terminal until a key is pressed."""
        if not CURSES_AVAILABLE:
            if sys.platform == 'win32':
                raise TerminalSetupError(
                    "curses library not available. Try: pip install windows-curses"
                )
            raise TerminalSetupError("curses library not available")

        try:
            locale.setlocale(locale.LC_ALL, '')
        except locale.Error:
            logger.warning("Locale not supported, block glyphs may not render")
        try:
            curses.wrapper(self._main_loop)
        except curses.error as e:
            raise TerminalSetupError(f"cannot initialize terminal: {e}") from e
        logger.info(f"Screensaver stopped after {self.frames} frames")

    def _main_loop(self, screen):
        """Main curses loop."""
        self.screen = screen
        self.running = True

        # Setup curses
        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        screen.nodelay(True)
        screen.keypad(True)
        Colors.init_colors()

        self._update_dimensions()
        self.scene = generate_scene(self.width, self.height, self.rng, self.config)
        interval = self.config.interval
        logger.info(f"Screensaver started at {self.width}x{self.height}, "
                    f"{self.config.interval_ms}ms per frame, "
                    f"weather: {self.config.weather.display_name}")

        while self.running:
            frame_start = self._clock()
            try:
                key = screen.getch()
                if key == curses.KEY_RESIZE:
                    self._handle_resize()
                elif key != NO_KEY:
                    logger.debug(f"Key {key} pressed, exiting")
                    self.running = False
                    break

                step_scene(self.scene, self.rng, self.config)
                draw_frame(screen, compose_frame(self.scene))
                self.frames += 1
            except KeyboardInterrupt:
                self.running = False
                break

            elapsed = self._clock() - frame_start
            if elapsed < interval:
                self._sleep(interval - elapsed)

    def _handle_resize(self):
        """Handle terminal resize by generating a city for the new size."""
        old_width, old_height = self.width, self.height
        self._update_dimensions()
        if (self.width, self.height) != (old_width, old_height):
            logger.info(f"Terminal resized from {old_width}x{old_height} "
                        f"to {self.width}x{self.height}")
            self.scene = generate_scene(self.width, self.height, self.rng, self.config)
        self.screen.clear()

    def _update_dimensions(self):
        """Update terminal dimensions."""
        try:
            self.height, self.width = self.screen.getmaxyx()
        except curses.error as e:
            raise TerminalSetupError(f"cannot read terminal size: {e}") from e


def _stdout_is_tty() -> bool:
    return sys.stdout.isatty()


def configure_logging(log_file: Optional[str], verbose: bool = False):
    """Send logs to a file. Without one, logs are dropped so the screen stays clean."""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="city-screensaver",
        description="City Screensaver - night-time cityscape for the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    city-screensaver                    # Clear night, default traffic
    city-screensaver --rain             # Rain over the city
    city-screensaver --snow --stars 120 # Snowy night with more stars
    city-screensaver --seed 7           # Same city every run

Press any key to exit.
        """
    )
    parser.add_argument("--stars", type=_non_negative_int, default=50,
                        help="Number of stars (default: 50)")
    parser.add_argument("--clouds", type=_non_negative_int, default=5,
                        help="Number of clouds (default: 5)")
    parser.add_argument("--vehicles", type=_non_negative_int, default=4,
                        help="Number of vehicles on the street (default: 4)")
    parser.add_argument("--interval", type=int, default=50,
                        help="Frame interval in milliseconds (default: 50)")
    weather = parser.add_mutually_exclusive_group()
    weather.add_argument("--rain", action="store_true",
                         help="Enable rain")
    weather.add_argument("--snow", action="store_true",
                         help="Enable snow")
    parser.add_argument("--raindrops", type=_non_negative_int, default=100,
                        help="Number of raindrops with --rain (default: 100)")
    parser.add_argument("--snowflakes", type=_non_negative_int, default=50,
                        help="Number of snowflakes with --snow (default: 50)")
    parser.add_argument("--seed", type=int,
                        help="Random seed for a reproducible city")
    parser.add_argument("--log-file", type=str,
                        help="Write log messages to this file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug-level logging (with --log-file)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for the city-screensaver command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    try:
        config = ScreensaverConfig.from_args(args)
    except ConfigError as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if not _stdout_is_tty():
        print("Error: city-screensaver must run in a terminal.", file=sys.stderr)
        return EXIT_TERMINAL_ERROR

    try:
        Screensaver(config).run()
    except ScreensaverError as e:
        logger.error(f"Screensaver failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        pass
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
