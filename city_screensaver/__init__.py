"""
City Screensaver - Terminal Night Cityscape

A terminal screensaver rendering a procedurally generated city at night:
buildings with flickering windows, passing vehicles, a moon, twinkling stars
and optional rain or snow. Any key exits.

Basic Usage:
    from city_screensaver import Screensaver
    Screensaver().run()

Reproducible City:
    from city_screensaver import Screensaver, ScreensaverConfig, WeatherMode

    config = ScreensaverConfig(seed=42, weather=WeatherMode.SNOW)
    Screensaver(config).run()
"""

import logging

__version__ = "1.0.0"

# Core classes
from .screensaver import Screensaver, main
from .config import ScreensaverConfig
from .generator import generate_scene
from .simulation import step_scene
from .renderer import Frame, compose_frame

# Data models
from .models import (
    Scene,
    Building,
    Vehicle,
    VehicleKind,
    Star,
    Moon,
    Cloud,
)

# Visual components
from .colors import Colors
from .weather import WeatherMode, RainDrop, Snowflake

# Errors
from .errors import (
    ScreensaverError,
    TerminalSetupError,
    TerminalTooSmallError,
    ConfigError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "Screensaver",
    "main",
    "ScreensaverConfig",
    "generate_scene",
    "step_scene",
    "Frame",
    "compose_frame",
    # Models
    "Scene",
    "Building",
    "Vehicle",
    "VehicleKind",
    "Star",
    "Moon",
    "Cloud",
    # Visual
    "Colors",
    "WeatherMode",
    "RainDrop",
    "Snowflake",
    # Errors
    "ScreensaverError",
    "TerminalSetupError",
    "TerminalTooSmallError",
    "ConfigError",
]
