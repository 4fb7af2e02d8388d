"""
City Data Models - Data classes for the animated scene.

Everything the render loop mutates lives here. Entities are created once by
the scene generator and then only changed in place, so counts stay fixed for
the life of a Scene.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .weather import RainDrop, Snowflake, WeatherMode

# Twinkle phases, dimmest to brightest
STAR_GLYPHS = ('.', '*', '+', "'")

ANTENNA_GLYPHS = ('|', 'Y', 'i')

MOON_ART = [
    "  ,'.'.",
    " ,'. ..'.",
    ".' .. '. '.",
]

# Rows reserved under the skyline: kerb + two lanes, plus the baseline row
STREET_ROWS = 3


class VehicleKind(Enum):
    """Kinds of vehicle that drive through the city."""
    CAR = "car"
    VAN = "van"
    LORRY = "lorry"

    @property
    def sprites(self) -> Tuple[str, str]:
        """(eastbound, westbound) one-row sprites."""
        return {
            VehicleKind.CAR: ("=[o_o]>", "<[o_o]="),
            VehicleKind.VAN: ("[|__|o]>", "<[o|__|]"),
            VehicleKind.LORRY: ("[#####][o]>", "<[o][#####]"),
        }[self]

    def sprite(self, direction: int) -> str:
        east, west = self.sprites
        return east if direction > 0 else west

    @property
    def length(self) -> int:
        return len(self.sprites[0])


@dataclass
class Building:
    """A building standing on the baseline, with a fixed grid of windows."""
    x: int
    width: int
    height: int
    windows: List[List[bool]] = field(default_factory=list)
    shade: int = 0
    antenna: Optional[str] = None

    @property
    def right(self) -> int:
        """First column past the building."""
        return self.x + self.width

    def top(self, ground_y: int) -> int:
        """Row of the roof when the bottom row sits on ground_y."""
        return ground_y - self.height + 1

    @staticmethod
    def window_offsets(extent: int) -> range:
        """Offsets of window cells along one axis of a facade."""
        return range(1, extent - 1, 2)

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """(rows, columns) of the declared window grid."""
        return (len(self.window_offsets(self.height)),
                len(self.window_offsets(self.width)))

    def window_cells(self, ground_y: int):
        """Yield (x, y, lit) screen positions for every window."""
        top = self.top(ground_y)
        col_offsets = self.window_offsets(self.width)
        for row_idx, row_offset in enumerate(self.window_offsets(self.height)):
            row = self.windows[row_idx]
            for col_idx, col_offset in enumerate(col_offsets):
                yield self.x + col_offset, top + row_offset, row[col_idx]

    @property
    def lit_count(self) -> int:
        return sum(sum(row) for row in self.windows)


@dataclass
class Vehicle:
    """A vehicle on a street lane. x is the sprite's left edge."""
    kind: VehicleKind
    lane: int
    x: float
    direction: int
    speed: float
    color: int = 0

    @property
    def sprite(self) -> str:
        return self.kind.sprite(self.direction)


@dataclass
class Star:
    """A star in the night sky; phase indexes STAR_GLYPHS."""
    x: int
    y: int
    phase: int = 0

    @property
    def glyph(self) -> str:
        return STAR_GLYPHS[self.phase % len(STAR_GLYPHS)]


@dataclass
class Moon:
    """The moon. It does not move."""
    x: int
    y: int
    art: List[str] = field(default_factory=lambda: list(MOON_ART))

    @property
    def width(self) -> int:
        return max(len(row) for row in self.art)

    @property
    def height(self) -> int:
        return len(self.art)


@dataclass
class Cloud:
    """A cloud drifting right across the upper sky."""
    x: float
    y: int
    shape: str
    speed: float


def skyline_top(buildings: List[Building], ground_y: int, x: int) -> int:
    """Highest row occupied by a building at column x (ground_y + 1 in gaps)."""
    for building in buildings:
        if building.x <= x < building.right:
            return building.top(ground_y)
    return ground_y + 1


@dataclass
class Scene:
    """Full mutable animation state for one running instance."""
    width: int
    height: int
    buildings: List[Building] = field(default_factory=list)
    vehicles: List[Vehicle] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    moon: Optional[Moon] = None
    clouds: List[Cloud] = field(default_factory=list)
    raindrops: List[RainDrop] = field(default_factory=list)
    snowflakes: List[Snowflake] = field(default_factory=list)
    weather: WeatherMode = WeatherMode.CLEAR
    frame: int = 0

    @property
    def ground_y(self) -> int:
        """Baseline row: the bottom row of every building."""
        return self.height - STREET_ROWS - 1

    @property
    def kerb_y(self) -> int:
        return self.height - STREET_ROWS

    @property
    def lanes(self) -> Tuple[int, int]:
        """(eastbound, westbound) lane rows."""
        return (self.height - 2, self.height - 1)

    def skyline_top(self, x: int) -> int:
        return skyline_top(self.buildings, self.ground_y, x)

    def entity_counts(self) -> Tuple[int, ...]:
        return (len(self.buildings), len(self.vehicles), len(self.stars),
                len(self.clouds), len(self.raindrops), len(self.snowflakes))
