"""
Screensaver configuration.

All tunables in one dataclass. Defaults reproduce the plain `city-screensaver`
invocation; command-line flags only override them.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError
from .weather import WeatherMode

logger = logging.getLogger(__name__)

# Upper bounds keep a typo like --stars 5000000 from stalling generation
MAX_STARS = 2000
MAX_CLOUDS = 50
MAX_VEHICLES = 40
MAX_PARTICLES = 5000


@dataclass
class ScreensaverConfig:
    """Settings for one screensaver run."""
    stars: int = 50
    clouds: int = 5
    vehicles: int = 4
    raindrops: int = 100
    snowflakes: int = 50
    interval_ms: int = 50
    weather: WeatherMode = WeatherMode.CLEAR
    seed: Optional[int] = None
    lit_probability: float = 0.3
    flicker_probability: float = 0.01
    twinkle_probability: float = 0.05
    antenna_probability: float = 0.3

    @property
    def interval(self) -> float:
        """Frame interval in seconds."""
        return self.interval_ms / 1000.0

    def validate(self) -> "ScreensaverConfig":
        """Check every value is in range. Returns self so calls can chain."""
        counts = (
            ("stars", self.stars, MAX_STARS),
            ("clouds", self.clouds, MAX_CLOUDS),
            ("vehicles", self.vehicles, MAX_VEHICLES),
            ("raindrops", self.raindrops, MAX_PARTICLES),
            ("snowflakes", self.snowflakes, MAX_PARTICLES),
        )
        for name, value, upper in counts:
            if not 0 <= value <= upper:
                raise ConfigError(f"{name} must be between 0 and {upper}, got {value}")

        if self.interval_ms <= 0:
            raise ConfigError(f"interval must be a positive number of milliseconds, got {self.interval_ms}")

        for name in ("lit_probability", "flicker_probability",
                     "twinkle_probability", "antenna_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be between 0 and 1, got {value}")

        if not isinstance(self.weather, WeatherMode):
            raise ConfigError(f"unknown weather mode: {self.weather!r}")
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ScreensaverConfig":
        """Build a validated config from parsed command-line arguments."""
        weather = WeatherMode.CLEAR
        if args.rain:
            weather = WeatherMode.RAIN
        elif args.snow:
            weather = WeatherMode.SNOW

        config = cls(
            stars=args.stars,
            clouds=args.clouds,
            vehicles=args.vehicles,
            raindrops=args.raindrops,
            snowflakes=args.snowflakes,
            interval_ms=args.interval,
            weather=weather,
            seed=args.seed,
        )
        config.validate()
        logger.debug(f"Configuration: {config}")
        return config
