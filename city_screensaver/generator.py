"""
Scene Generator - builds the randomized city a screensaver run animates.

Layout, bottom up:

    row 0 .. ground_y       sky, stars, moon, clouds, buildings
    ground_y                baseline, the bottom row of every building
    height - 3              kerb
    height - 2              eastbound lane
    height - 1              westbound lane

Buildings are laid left to right from column 0 with small gaps and are never
allowed to run past the right edge. Stars are only placed above whatever
building covers their column.
"""

import logging
import random
from typing import List, Optional

from .colors import Colors
from .config import ScreensaverConfig
from .errors import TerminalTooSmallError
from .models import (
    ANTENNA_GLYPHS,
    STAR_GLYPHS,
    Building,
    Cloud,
    Moon,
    Scene,
    Star,
    Vehicle,
    VehicleKind,
    skyline_top,
)
from .weather import WeatherMode, create_raindrops, create_snowflakes

logger = logging.getLogger(__name__)

# Smallest terminal that still fits a building, the moon and the street
MIN_WIDTH = 20
MIN_HEIGHT = 10

MIN_BUILDING_WIDTH = 5
MAX_BUILDING_WIDTH = 14
MIN_BUILDING_HEIGHT = 5
MIN_GAP = 1
MAX_GAP = 4
FACADE_SHADES = len(Colors.BUILDING_SHADES)

# Vehicle speed range in hundredths of a cell per frame, upper bound excluded
MIN_VEHICLE_SPEED = 30
MAX_VEHICLE_SPEED = 120

CLOUD_SHAPES = ("_.-^-._", " ~~~", "(-.-)")

# Distance of the moon's left edge from the right side of the screen
MOON_INSET = 15


def check_terminal_size(width: int, height: int):
    """Raise TerminalTooSmallError if nothing sensible fits on screen."""
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        raise TerminalTooSmallError(width, height, MIN_WIDTH, MIN_HEIGHT)


def create_buildings(width: int, height: int, rng: random.Random,
                     lit_probability: float = 0.3,
                     antenna_probability: float = 0.3) -> List[Building]:
    """Lay out non-overlapping buildings across the full width."""
    ground_y = height - 4
    max_height = ground_y - 1  # keeps two sky rows above the tallest roof

    buildings = []
    x = 0
    while width - x >= MIN_BUILDING_WIDTH:
        building_width = min(rng.randint(MIN_BUILDING_WIDTH, MAX_BUILDING_WIDTH), width - x)
        building_height = rng.randint(MIN_BUILDING_HEIGHT, max_height)

        rows = len(Building.window_offsets(building_height))
        cols = len(Building.window_offsets(building_width))
        windows = [[rng.random() < lit_probability for _ in range(cols)] for _ in range(rows)]

        antenna = None
        if rng.random() < antenna_probability:
            antenna = rng.choice(ANTENNA_GLYPHS)

        buildings.append(Building(
            x=x,
            width=building_width,
            height=building_height,
            windows=windows,
            shade=rng.randrange(FACADE_SHADES),
            antenna=antenna,
        ))
        x += building_width + rng.randint(MIN_GAP, MAX_GAP)

    return buildings


def create_vehicles(width: int, height: int, rng: random.Random, count: int) -> List[Vehicle]:
    """Place vehicles on the two lanes, alternating eastbound and westbound."""
    eastbound, westbound = height - 2, height - 1
    vehicles = []
    for i in range(count):
        direction = 1 if i % 2 == 0 else -1
        vehicles.append(Vehicle(
            kind=rng.choice(list(VehicleKind)),
            lane=eastbound if direction > 0 else westbound,
            x=rng.random() * width,
            direction=direction,
            speed=rng.randrange(MIN_VEHICLE_SPEED, MAX_VEHICLE_SPEED) / 100,
            color=rng.choice(Colors.VEHICLE_COLORS),
        ))
    return vehicles


def create_stars(width: int, height: int, buildings: List[Building],
                 rng: random.Random, count: int) -> List[Star]:
    """Scatter stars over the top half of the sky, above the skyline."""
    ground_y = height - 4
    sky_limit = height // 2

    stars = []
    for _ in range(count):
        x = rng.randrange(width)
        ceiling = min(sky_limit, skyline_top(buildings, ground_y, x))
        stars.append(Star(
            x=x,
            y=rng.randrange(ceiling),
            phase=rng.randrange(len(STAR_GLYPHS)),
        ))
    return stars


def create_moon(width: int) -> Moon:
    return Moon(x=max(0, width - MOON_INSET), y=1)


def create_clouds(width: int, height: int, rng: random.Random, count: int) -> List[Cloud]:
    """Clouds live in the upper quarter of the screen."""
    band = max(1, height // 4)
    return [
        Cloud(
            x=rng.random() * width,
            y=rng.randrange(band),
            shape=rng.choice(CLOUD_SHAPES),
            speed=rng.uniform(0.5, 1.5),
        )
        for _ in range(count)
    ]


def generate_scene(width: int, height: int, rng: random.Random,
                   config: Optional[ScreensaverConfig] = None) -> Scene:
    """
    Build a fully populated scene for a terminal of the given size.

    Args:
        width: Terminal columns
        height: Terminal rows
        rng: Random source; seed it for a reproducible city
        config: Counts and probabilities (defaults if omitted)

    Raises:
        TerminalTooSmallError: if the terminal is below MIN_WIDTH x MIN_HEIGHT
    """
    config = config or ScreensaverConfig()
    check_terminal_size(width, height)

    scene = Scene(width=width, height=height, weather=config.weather)
    scene.buildings = create_buildings(width, height, rng,
                                       lit_probability=config.lit_probability,
                                       antenna_probability=config.antenna_probability)
    scene.vehicles = create_vehicles(width, height, rng, config.vehicles)
    scene.stars = create_stars(width, height, scene.buildings, rng, config.stars)
    scene.moon = create_moon(width)
    scene.clouds = create_clouds(width, height, rng, config.clouds)

    if config.weather == WeatherMode.RAIN:
        scene.raindrops = create_raindrops(width, height, rng, config.raindrops)
    elif config.weather == WeatherMode.SNOW:
        scene.snowflakes = create_snowflakes(width, height, rng, config.snowflakes)

    logger.info(
        f"Generated {width}x{height} scene: {len(scene.buildings)} buildings, "
        f"{len(scene.vehicles)} vehicles, {len(scene.stars)} stars, "
        f"weather={config.weather.value}"
    )
    return scene
