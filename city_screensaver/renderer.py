"""
Frame composition and drawing.

A frame is composed into a grid of (char, color) cells first and only then
written to curses. Composition needs no terminal, so everything the screen
would show can be checked in tests.

Layer order, back to front: clouds, stars, moon, buildings, street, weather,
vehicles.
"""

from typing import List, Tuple

# Handle curses import for Windows compatibility
try:
    import curses
except ImportError:
    curses = None

from .colors import Colors
from .models import Building, Scene
from .weather import RAIN_GLYPH, WeatherMode

FACADE_GLYPH = '█'
WINDOW_GLYPH = '■'
KERB_GLYPH = '='

Cell = Tuple[str, int]


class Frame:
    """One rendered snapshot of a scene, as a grid of (char, color) cells."""

    EMPTY: Cell = (' ', Colors.NORMAL)

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [[self.EMPTY] * width for _ in range(height)]

    def put(self, x: int, y: int, char: str, color: int):
        """Set one cell, silently ignoring positions off screen."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[y][x] = (char, color)

    def put_text(self, x: int, y: int, text: str, color: int, wrap: bool = False):
        """Write text from (x, y), skipping spaces so lower layers show through."""
        for offset, char in enumerate(text):
            if char == ' ':
                continue
            px = x + offset
            if wrap:
                px %= self.width
            self.put(px, y, char, color)

    def char_at(self, x: int, y: int) -> str:
        return self.cells[y][x][0]

    def color_at(self, x: int, y: int) -> int:
        return self.cells[y][x][1]

    def row_text(self, y: int) -> str:
        return ''.join(char for char, _ in self.cells[y])

    def __str__(self) -> str:
        return '\n'.join(self.row_text(y) for y in range(self.height))


def _compose_building(frame: Frame, building: Building, ground_y: int):
    top = building.top(ground_y)
    facade = Colors.BUILDING_SHADES[building.shade % len(Colors.BUILDING_SHADES)]

    for y in range(top, ground_y + 1):
        for x in range(building.x, building.right):
            frame.put(x, y, FACADE_GLYPH, facade)

    for x, y, lit in building.window_cells(ground_y):
        frame.put(x, y, WINDOW_GLYPH, Colors.WINDOW_ON if lit else Colors.WINDOW_OFF)

    if building.antenna:
        frame.put(building.x + building.width // 2, top - 1, building.antenna, Colors.ANTENNA)


def compose_frame(scene: Scene) -> Frame:
    """Compose the current scene state into a frame."""
    frame = Frame(scene.width, scene.height)

    for cloud in scene.clouds:
        frame.put_text(int(cloud.x), cloud.y, cloud.shape, Colors.CLOUD, wrap=True)

    for star in scene.stars:
        frame.put(star.x, star.y, star.glyph, Colors.STAR)

    if scene.moon:
        for row_idx, row in enumerate(scene.moon.art):
            frame.put_text(scene.moon.x, scene.moon.y + row_idx, row, Colors.MOON)

    for building in scene.buildings:
        _compose_building(frame, building, scene.ground_y)

    for x in range(scene.width):
        frame.put(x, scene.kerb_y, KERB_GLYPH, Colors.KERB)

    if scene.weather == WeatherMode.RAIN:
        for drop in scene.raindrops:
            frame.put(drop.x, drop.y, RAIN_GLYPH, Colors.RAIN)
    elif scene.weather == WeatherMode.SNOW:
        for flake in scene.snowflakes:
            frame.put(flake.x, flake.y, flake.glyph, Colors.SNOW)

    for vehicle in scene.vehicles:
        frame.put_text(int(vehicle.x), vehicle.lane, vehicle.sprite, vehicle.color, wrap=True)

    return frame


def draw_frame(screen, frame: Frame):
    """
    Write a composed frame to a curses screen and refresh it.

    Runs of same-colored cells go out in one addstr call. The bottom-right
    cell is never written, since curses raises when the cursor would move
    past the end of the screen.
    """
    screen.erase()
    max_y, max_x = screen.getmaxyx()
    height = min(frame.height, max_y)
    width = min(frame.width, max_x)

    for y in range(height):
        row = frame.cells[y]
        limit = width - 1 if y == max_y - 1 else width
        x = 0
        while x < limit:
            char, color = row[x]
            if char == ' ':
                x += 1
                continue
            start = x
            chars = []
            while x < limit and row[x][1] == color and row[x][0] != ' ':
                chars.append(row[x][0])
                x += 1
            try:
                screen.addstr(y, start, ''.join(chars), Colors.attr(color))
            except curses.error:
                pass

    screen.refresh()
