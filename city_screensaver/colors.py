"""
Color Definitions - Curses color pair management.

Every drawable element of the city maps to one color pair here. On
terminals with 256 colors the facades and unlit windows get proper
greys; 8-color terminals fall back to white and black with dim
attributes applied at draw time.
"""

import logging

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

logger = logging.getLogger(__name__)


class Colors:
    """Color pairs for curses."""
    NORMAL = 0
    # Sky
    STAR = 1
    MOON = 2
    CLOUD = 3
    # Buildings (three facade tones, dark to light)
    BUILDING_DARK = 4
    BUILDING_MID = 5
    BUILDING_LIGHT = 6
    WINDOW_ON = 7        # Lit window - warm yellow
    WINDOW_OFF = 8       # Unlit window - near black
    ANTENNA = 9
    # Street
    KERB = 10
    # Weather
    RAIN = 11
    SNOW = 12
    # Vehicles
    VEHICLE_RED = 13
    VEHICLE_GREEN = 14
    VEHICLE_YELLOW = 15
    VEHICLE_CYAN = 16
    VEHICLE_MAGENTA = 17
    VEHICLE_WHITE = 18

    # Facade tone index (Building.shade) -> color pair
    BUILDING_SHADES = (BUILDING_DARK, BUILDING_MID, BUILDING_LIGHT)

    VEHICLE_COLORS = (
        VEHICLE_RED,
        VEHICLE_GREEN,
        VEHICLE_YELLOW,
        VEHICLE_CYAN,
        VEHICLE_MAGENTA,
        VEHICLE_WHITE,
    )

    # Pairs rendered with A_DIM when the terminal lacks 256 colors
    DIM_ON_BASIC = frozenset({BUILDING_DARK, BUILDING_MID, WINDOW_OFF, CLOUD})

    _enabled = False
    _extended = False

    @staticmethod
    def init_colors():
        """Initialize curses color pairs."""
        if not CURSES_AVAILABLE or curses is None:
            return
        if not curses.has_colors():
            logger.info("Terminal has no color support, drawing monochrome")
            return
        curses.start_color()
        Colors._enabled = True
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK

        if curses.COLORS >= 256:
            Colors._extended = True
            Colors._init_extended_colors(background)
        else:
            Colors._extended = False
            Colors._init_basic_colors(background)

    @staticmethod
    def _init_extended_colors(background: int):
        """Initialize the 256-color palette (xterm grey ramp for facades)."""
        curses.init_pair(Colors.STAR, 255, background)
        curses.init_pair(Colors.MOON, 254, background)
        curses.init_pair(Colors.CLOUD, 245, background)
        curses.init_pair(Colors.BUILDING_DARK, 237, background)
        curses.init_pair(Colors.BUILDING_MID, 239, background)
        curses.init_pair(Colors.BUILDING_LIGHT, 241, background)
        curses.init_pair(Colors.WINDOW_ON, 226, background)
        curses.init_pair(Colors.WINDOW_OFF, 235, background)
        curses.init_pair(Colors.ANTENNA, 244, background)
        curses.init_pair(Colors.KERB, 243, background)
        curses.init_pair(Colors.RAIN, 61, background)
        curses.init_pair(Colors.SNOW, 252, background)
        Colors._init_vehicle_colors(background)

    @staticmethod
    def _init_basic_colors(background: int):
        """Initialize the 8-color fallback palette."""
        curses.init_pair(Colors.STAR, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.MOON, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.CLOUD, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.BUILDING_DARK, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.BUILDING_MID, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.BUILDING_LIGHT, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.WINDOW_ON, curses.COLOR_YELLOW, background)
        curses.init_pair(Colors.WINDOW_OFF, curses.COLOR_BLACK, background)
        curses.init_pair(Colors.ANTENNA, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.KERB, curses.COLOR_WHITE, background)
        curses.init_pair(Colors.RAIN, curses.COLOR_BLUE, background)
        curses.init_pair(Colors.SNOW, curses.COLOR_WHITE, background)
        Colors._init_vehicle_colors(background)

    @staticmethod
    def _init_vehicle_colors(background: int):
        curses.init_pair(Colors.VEHICLE_RED, curses.COLOR_RED, background)
        curses.init_pair(Colors.VEHICLE_GREEN, curses.COLOR_GREEN, background)
        curses.init_pair(Colors.VEHICLE_YELLOW, curses.COLOR_YELLOW, background)
        curses.init_pair(Colors.VEHICLE_CYAN, curses.COLOR_CYAN, background)
        curses.init_pair(Colors.VEHICLE_MAGENTA, curses.COLOR_MAGENTA, background)
        curses.init_pair(Colors.VEHICLE_WHITE, curses.COLOR_WHITE, background)

    @staticmethod
    def attr(color: int) -> int:
        """Curses attribute for a color pair, dimmed where the palette is basic."""
        if not Colors._enabled:
            # Monochrome: lit and unlit windows still have to differ
            if color == Colors.WINDOW_ON:
                return curses.A_BOLD
            if color == Colors.WINDOW_OFF:
                return curses.A_DIM
            return curses.A_NORMAL
        attr = curses.color_pair(color)
        if not Colors._extended and color in Colors.DIM_ON_BASIC:
            attr |= curses.A_DIM
        return attr
