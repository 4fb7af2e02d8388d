"""
Tests for frame composition and drawing.

Composition is checked cell by cell on a hand-built scene; drawing is checked
against a fake curses screen.
"""

import os
import random
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from city_screensaver.colors import Colors
from city_screensaver.generator import generate_scene
from city_screensaver.models import Building, Cloud, Moon, Scene, Star, Vehicle, VehicleKind
from city_screensaver.renderer import (
    FACADE_GLYPH,
    KERB_GLYPH,
    WINDOW_GLYPH,
    Frame,
    compose_frame,
    draw_frame,
)
from city_screensaver.weather import RainDrop, Snowflake, WeatherMode


class RecordingScreen:
    """Minimal stand-in for a curses window that records addstr calls."""

    def __init__(self, height: int, width: int):
        self.height = height
        self.width = width
        self.writes = []
        self.refreshed = 0

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.writes = []

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text, attr))

    def refresh(self):
        self.refreshed += 1


@pytest.fixture
def small_scene():
    """30x12 scene: ground_y 8, kerb 9, lanes 10 and 11."""
    scene = Scene(width=30, height=12)
    scene.buildings = [
        Building(x=2, width=5, height=5, windows=[[True, False], [False, True]],
                 shade=1, antenna='Y'),
    ]
    scene.stars = [Star(x=10, y=1, phase=1)]
    return scene


# ===========================================================================
# Frame Buffer Tests
# ===========================================================================

class TestFrame:
    def test_empty_frame(self):
        frame = Frame(10, 3)
        assert frame.row_text(0) == " " * 10
        assert str(frame).count("\n") == 2

    def test_put_ignores_off_screen(self):
        frame = Frame(10, 3)
        frame.put(-1, 0, 'x', Colors.STAR)
        frame.put(10, 0, 'x', Colors.STAR)
        frame.put(0, 3, 'x', Colors.STAR)
        assert all(frame.row_text(y) == " " * 10 for y in range(3))

    def test_put_text_wraps(self):
        frame = Frame(10, 1)
        frame.put_text(8, 0, "abcd", Colors.STAR, wrap=True)
        assert frame.row_text(0) == "cd      ab"

    def test_put_text_clips_without_wrap(self):
        frame = Frame(10, 1)
        frame.put_text(8, 0, "abcd", Colors.STAR)
        assert frame.row_text(0) == "        ab"

    def test_put_text_keeps_lower_layer_under_spaces(self):
        frame = Frame(5, 1)
        frame.put_text(0, 0, "xxxxx", Colors.STAR)
        frame.put_text(0, 0, "a b", Colors.MOON)
        assert frame.row_text(0) == "axbxx"


# ===========================================================================
# Composition Tests
# ===========================================================================

class TestComposeFrame:
    def test_building_facade(self, small_scene):
        frame = compose_frame(small_scene)
        # Top-left and bottom-right corners of the facade
        assert frame.char_at(2, 4) == FACADE_GLYPH
        assert frame.char_at(6, 8) == FACADE_GLYPH
        assert frame.color_at(2, 4) == Colors.BUILDING_MID
        # Nothing beside or above the building
        assert frame.char_at(7, 8) == " "
        assert frame.char_at(2, 3) == " "

    def test_windows(self, small_scene):
        frame = compose_frame(small_scene)
        assert frame.char_at(3, 5) == WINDOW_GLYPH
        assert frame.color_at(3, 5) == Colors.WINDOW_ON
        assert frame.color_at(5, 5) == Colors.WINDOW_OFF
        assert frame.color_at(3, 7) == Colors.WINDOW_OFF
        assert frame.color_at(5, 7) == Colors.WINDOW_ON
        # Window cells only at odd offsets
        assert frame.char_at(4, 5) == FACADE_GLYPH
        assert frame.char_at(3, 6) == FACADE_GLYPH

    def test_antenna_above_roof_centre(self, small_scene):
        frame = compose_frame(small_scene)
        assert frame.char_at(4, 3) == 'Y'
        assert frame.color_at(4, 3) == Colors.ANTENNA

    def test_star(self, small_scene):
        frame = compose_frame(small_scene)
        assert frame.char_at(10, 1) == '*'
        assert frame.color_at(10, 1) == Colors.STAR

    def test_kerb_row(self, small_scene):
        frame = compose_frame(small_scene)
        assert frame.row_text(9) == KERB_GLYPH * 30

    def test_vehicle_wraps_across_edge(self, small_scene):
        small_scene.vehicles = [Vehicle(kind=VehicleKind.CAR, lane=10, x=27.6, direction=1,
                                        speed=1.0, color=Colors.VEHICLE_RED)]
        frame = compose_frame(small_scene)
        row = frame.row_text(10)
        assert row[27:30] == "=[o"
        assert row[0:4] == "_o]>"
        assert frame.color_at(0, 10) == Colors.VEHICLE_RED

    def test_westbound_sprite(self, small_scene):
        small_scene.vehicles = [Vehicle(kind=VehicleKind.LORRY, lane=11, x=5.0, direction=-1,
                                        speed=1.0)]
        frame = compose_frame(small_scene)
        assert frame.row_text(11)[5:16] == "<[o][#####]"

    def test_moon_drawn_behind_buildings(self, small_scene):
        small_scene.moon = Moon(x=0, y=3)
        frame = compose_frame(small_scene)
        # Row 4 of the screen is the roof row; the building hides the moon there
        assert frame.char_at(2, 4) == FACADE_GLYPH
        # Row 3 is moon art, except where the antenna stands
        assert frame.char_at(2, 3) == ','
        assert frame.char_at(4, 3) == 'Y'

    def test_clouds_drawn(self, small_scene):
        small_scene.clouds = [Cloud(x=20.0, y=0, shape="(-.-)", speed=1.0)]
        frame = compose_frame(small_scene)
        assert frame.row_text(0)[20:25] == "(-.-)"
        assert frame.color_at(20, 0) == Colors.CLOUD

    def test_rain_over_buildings(self, small_scene):
        small_scene.weather = WeatherMode.RAIN
        small_scene.raindrops = [RainDrop(x=4, y=6, speed=1)]
        frame = compose_frame(small_scene)
        assert frame.char_at(4, 6) == '|'
        assert frame.color_at(4, 6) == Colors.RAIN

    def test_snow(self, small_scene):
        small_scene.weather = WeatherMode.SNOW
        small_scene.snowflakes = [Snowflake(x=12, y=2, speed_y=1, drift=0, glyph='o')]
        frame = compose_frame(small_scene)
        assert frame.char_at(12, 2) == 'o'

    def test_particles_hidden_in_clear_weather(self, small_scene):
        small_scene.raindrops = [RainDrop(x=12, y=2, speed=1)]
        frame = compose_frame(small_scene)
        assert frame.char_at(12, 2) == ' '

    def test_generated_scene_has_city(self):
        scene = generate_scene(80, 24, random.Random(0))
        frame = compose_frame(scene)
        text = str(frame)
        assert FACADE_GLYPH in text
        assert frame.row_text(scene.kerb_y) == KERB_GLYPH * 80
        # Every building column reaches the baseline
        for building in scene.buildings:
            assert frame.char_at(building.x, scene.ground_y) == FACADE_GLYPH


# ===========================================================================
# Drawing Tests
# ===========================================================================

class TestDrawFrame:
    @pytest.fixture(autouse=True)
    def plain_attrs(self, monkeypatch):
        monkeypatch.setattr(Colors, "attr", staticmethod(lambda color: color))

    def test_draw_matches_frame(self):
        scene = generate_scene(80, 24, random.Random(3))
        frame = compose_frame(scene)
        screen = RecordingScreen(24, 80)
        draw_frame(screen, frame)

        drawn = [[" "] * 80 for _ in range(24)]
        for y, x, text, _ in screen.writes:
            for offset, char in enumerate(text):
                drawn[y][x + offset] = char

        for y in range(24):
            expected = frame.row_text(y)
            if y == 23:
                expected = expected[:79] + " "
            assert "".join(drawn[y]) == expected
        assert screen.refreshed == 1

    def test_bottom_right_cell_never_written(self):
        frame = Frame(10, 4)
        for x in range(10):
            frame.put(x, 3, '#', Colors.KERB)
        screen = RecordingScreen(4, 10)
        draw_frame(screen, frame)
        for y, x, text, _ in screen.writes:
            if y == 3:
                assert x + len(text) <= 9

    def test_runs_grouped_by_color(self):
        frame = Frame(10, 2)
        frame.put_text(0, 0, "aaa", Colors.STAR)
        frame.put_text(3, 0, "bb", Colors.MOON)
        screen = RecordingScreen(2, 10)
        draw_frame(screen, frame)
        assert (0, 0, "aaa", Colors.STAR) in screen.writes
        assert (0, 3, "bb", Colors.MOON) in screen.writes

    def test_frame_larger_than_screen_is_clipped(self):
        frame = Frame(20, 10)
        frame.put(15, 8, 'x', Colors.STAR)
        frame.put(2, 2, 'y', Colors.STAR)
        screen = RecordingScreen(5, 10)
        draw_frame(screen, frame)
        assert [(y, x, text) for y, x, text, _ in screen.writes] == [(2, 2, 'y')]
