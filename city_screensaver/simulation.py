"""
Per-frame scene updates.

Each function mutates entities in place; nothing is created or removed, so a
scene keeps the entity counts it was generated with.
"""

import random
from typing import List

from .config import ScreensaverConfig
from .models import STAR_GLYPHS, Building, Cloud, Scene, Star, Vehicle
from .weather import WeatherMode, update_raindrops, update_snowflakes

# Clouds move a tenth of their speed per frame
CLOUD_STEP = 0.1


def wrap(position: float, width: int) -> float:
    """Wrap a horizontal position into [0, width)."""
    position %= width
    # A tiny negative float can round up to exactly width
    if position >= width:
        position = 0.0
    return position


def flicker_windows(buildings: List[Building], rng: random.Random, probability: float):
    """Toggle each window independently with the given probability."""
    for building in buildings:
        for row in building.windows:
            for idx in range(len(row)):
                if rng.random() < probability:
                    row[idx] = not row[idx]


def advance_vehicles(vehicles: List[Vehicle], width: int):
    """Move vehicles along their lanes, wrapping at the screen edges."""
    for vehicle in vehicles:
        vehicle.x = wrap(vehicle.x + vehicle.direction * vehicle.speed, width)


def twinkle_stars(stars: List[Star], rng: random.Random, probability: float):
    for star in stars:
        if rng.random() < probability:
            star.phase = (star.phase + 1) % len(STAR_GLYPHS)


def drift_clouds(clouds: List[Cloud], width: int):
    for cloud in clouds:
        cloud.x = wrap(cloud.x + cloud.speed * CLOUD_STEP, width)


def step_scene(scene: Scene, rng: random.Random, config: ScreensaverConfig):
    """Advance the whole scene by one frame. The moon does not move."""
    flicker_windows(scene.buildings, rng, config.flicker_probability)
    advance_vehicles(scene.vehicles, scene.width)
    twinkle_stars(scene.stars, rng, config.twinkle_probability)
    drift_clouds(scene.clouds, scene.width)

    if scene.weather == WeatherMode.RAIN:
        update_raindrops(scene.raindrops, scene.width, scene.height, rng)
    elif scene.weather == WeatherMode.SNOW:
        update_snowflakes(scene.snowflakes, scene.width, scene.height, rng)

    scene.frame += 1
