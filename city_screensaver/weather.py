"""
Weather Effects - rain and snow particle systems.

Contains the WeatherMode enum and the particles that fall over the city.
Particle counts are fixed when a scene is generated; a particle that leaves
the bottom of the screen is moved back to the top rather than replaced.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import List

SNOWFLAKE_GLYPHS = ('*', '.', 'o')
RAIN_GLYPH = '|'


class WeatherMode(Enum):
    """Weather over the city."""
    CLEAR = "clear"    # Stars and moon only
    RAIN = "rain"      # Fast vertical drops
    SNOW = "snow"      # Slow flakes with sideways drift

    @property
    def display_name(self) -> str:
        """Name used in log messages."""
        return self.value.title()


@dataclass
class RainDrop:
    x: int
    y: int
    speed: int


@dataclass
class Snowflake:
    x: int
    y: int
    speed_y: int
    drift: int
    glyph: str


def create_raindrops(width: int, height: int, rng: random.Random, count: int) -> List[RainDrop]:
    """Scatter raindrops over the whole screen, falling 1-2 rows per frame."""
    return [
        RainDrop(x=rng.randrange(width), y=rng.randrange(height), speed=rng.randint(1, 2))
        for _ in range(count)
    ]


def create_snowflakes(width: int, height: int, rng: random.Random, count: int) -> List[Snowflake]:
    """Scatter snowflakes over the whole screen with a random sideways drift."""
    return [
        Snowflake(
            x=rng.randrange(width),
            y=rng.randrange(height),
            speed_y=1,
            drift=rng.randint(-1, 1),
            glyph=rng.choice(SNOWFLAKE_GLYPHS),
        )
        for _ in range(count)
    ]


def update_raindrops(raindrops: List[RainDrop], width: int, height: int, rng: random.Random):
    """Advance rain one frame. Drops that hit the bottom restart at the top."""
    for drop in raindrops:
        drop.y += drop.speed
        if drop.y >= height:
            drop.y = 0
            drop.x = rng.randrange(width)


def update_snowflakes(snowflakes: List[Snowflake], width: int, height: int, rng: random.Random):
    """Advance snow one frame. Flakes wrap sideways and restart at the top."""
    for flake in snowflakes:
        flake.y += flake.speed_y
        if flake.y >= height:
            flake.y = 0
            flake.x = rng.randrange(width)
        flake.x = (flake.x + flake.drift) % width
