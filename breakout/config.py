"""Configuration for Breakout.

Contains the reference resolution, physics constants, viewport presets,
and color definitions. Every size below is expressed at the reference
resolution and rescaled by the layout when the viewport changes.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from breakout.models import Color

# Reference resolution (layout scale factors are relative to this)
REFERENCE_WIDTH: int = 800
REFERENCE_HEIGHT: int = 600

# Viewports at or below this width use the compact profile
COMPACT_BREAKPOINT: int = 768
COMPACT_WIDTH_FRACTION: float = 0.95

# Ball
BALL_RADIUS: float = 10.0

# Paddle
PADDLE_DEFAULT_WIDTH: float = 80.0
PADDLE_MIN_WIDTH: float = 40.0
PADDLE_HEIGHT: float = 10.0
PADDLE_SPEED: float = 8.0           # pixels/tick while a direction key is held
PADDLE_BASELINE_OFFSET: float = 20.0  # distance from paddle top to surface bottom
PADDLE_SMOOTHING: float = 0.2       # fraction of the pointer gap closed per tick

# Brick geometry (grid size comes from the level table)
BRICK_WIDTH: float = 70.0
BRICK_HEIGHT: float = 20.0
BRICK_PADDING: float = 10.0
GRID_OFFSET_X: float = 45.0
GRID_OFFSET_Y: float = 60.0

# Seconds between clearing the grid and the next level appearing
TRANSITION_DELAY: float = 0.5

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (240, 240, 240)
ENTITY_COLOR: Tuple[int, int, int] = (0, 149, 221)
HUD_COLOR: Tuple[int, int, int] = (0, 0, 0)

# Brick colors by level color identifier
BRICK_COLORS: Dict[str, Color] = {
    'blue': Color(r=0, g=149, b=221),
    'green': Color(r=46, g=204, b=113),
    'orange': Color(r=230, g=126, b=34),
    'purple': Color(r=155, g=89, b=182),
    'red': Color(r=231, g=76, b=60),
    'yellow': Color(r=241, g=196, b=15),
    'gray': Color(r=127, g=140, b=141),
}


@dataclass
class ViewportProfile:
    """Per-viewport tuning.

    - desktop: fixed reference-sized surface
    - compact: narrow screens, surface fills 95% of the width and the
      ball launches slightly faster
    """

    name: str
    ball_speed: float       # Launch velocity component in pixels/tick


VIEWPORT_PROFILES: Dict[str, ViewportProfile] = {
    'desktop': ViewportProfile(name='desktop', ball_speed=4.0),
    'compact': ViewportProfile(name='compact', ball_speed=5.0),
}


def get_viewport_profile(name: str) -> ViewportProfile:
    """Get viewport profile by name, with fallback to desktop."""
    return VIEWPORT_PROFILES.get(name, VIEWPORT_PROFILES['desktop'])
