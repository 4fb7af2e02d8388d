"""
Errors raised by the screensaver and the exit codes they map to.
"""

# Process exit codes
EXIT_OK = 0
EXIT_TERMINAL_ERROR = 1
EXIT_USAGE = 2


class ScreensaverError(Exception):
    """Base class for screensaver failures."""
    exit_code = EXIT_TERMINAL_ERROR


class TerminalSetupError(ScreensaverError):
    """Raised when the terminal cannot be placed into curses mode or measured."""
    pass


class TerminalTooSmallError(ScreensaverError):
    """Raised when the terminal is too small to draw a city."""

    def __init__(self, width: int, height: int, min_width: int, min_height: int):
        self.width = width
        self.height = height
        self.min_width = min_width
        self.min_height = min_height
        super().__init__(
            f"terminal is {width}x{height}, need at least {min_width}x{min_height}"
        )


class ConfigError(ScreensaverError):
    """Raised when a configuration value is out of range."""
    exit_code = EXIT_USAGE
