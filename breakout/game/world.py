"""
Game world aggregate.

One World owns every piece of mutable game state: the entities, the
score, the level, the elapsed clock and the pending level transition.
The physics step and the progression controller both take it as an
explicit argument instead of reaching for shared globals.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from breakout.models import Resolution

from .entities import Ball, BrickGrid, Paddle


class GameEvent(Enum):
    """Things that happened during a tick."""
    WALL_HIT = "wall_hit"
    PADDLE_HIT = "paddle_hit"
    BRICK_HIT = "brick_hit"
    BALL_LOST = "ball_lost"
    LEVEL_CLEARED = "level_cleared"
    LEVEL_UP = "level_up"
    VICTORY = "victory"


@dataclass(frozen=True)
class PendingTransition:
    """A one-shot deferred level change.

    Attributes:
        deadline: World clock time (seconds) at which it fires
    """
    deadline: float


@dataclass
class StepResult:
    """Outcome of one physics step."""
    events: List[GameEvent] = field(default_factory=list)
    bricks_hit: List[Tuple[int, int]] = field(default_factory=list)
    ball_lost: bool = False


@dataclass
class World:
    """Single owner of all mutable game state.

    Attributes:
        surface: Drawing surface size
        ball: Current ball (replaced each tick)
        paddle: Paddle (mutated in place)
        bricks: Current brick grid (replaced on regeneration)
        score: Bricks hit since the last reset or level change
        level: Current level, 1-based
        clock: Seconds elapsed, advanced by the frame dt
        pending: Scheduled level transition, if any
    """
    surface: Resolution
    ball: Ball
    paddle: Paddle
    bricks: BrickGrid
    score: int = 0
    level: int = 1
    clock: float = 0.0
    pending: Optional[PendingTransition] = None

    @property
    def in_transition(self) -> bool:
        """Check if a level transition is waiting to fire."""
        return self.pending is not None
