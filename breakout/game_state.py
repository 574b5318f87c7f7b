"""Standard GameState enum for Breakout.

The game reports one of these via its `state` property. Resetting after
a lost ball happens within a single tick, so it never shows up here.
"""
from enum import Enum


class GameState(Enum):
    """Externally visible game states.

    States:
        PLAYING: Ball in play, physics running every tick
        LEVEL_TRANSITION: Grid cleared, ball and paddle hidden while the
            next level is pending
    """
    PLAYING = "playing"
    LEVEL_TRANSITION = "level_transition"
