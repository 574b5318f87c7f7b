"""
Input Event - a single player intent for the paddle.

Uses a frozen dataclass so events are immutable once queued.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from breakout.models import Point2D


class InputEventType(Enum):
    """Kinds of paddle input."""
    KEY_DOWN = "key_down"          # Direction key pressed
    KEY_UP = "key_up"              # Direction key released
    POINTER_MOVE = "pointer_move"  # Mouse or touch moved


LEFT = -1
RIGHT = 1


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Attributes:
        event_type: What happened
        timestamp: Time when the event occurred (seconds, monotonic clock)
        direction: LEFT or RIGHT for key events, 0 otherwise
        position: Pointer position in surface coordinates for pointer events
    """
    event_type: InputEventType
    timestamp: float
    direction: int = 0
    position: Optional[Point2D] = None

    def __post_init__(self):
        """Validate fields against the event type."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')
        if self.event_type == InputEventType.KEY_DOWN and self.direction not in (LEFT, RIGHT):
            raise ValueError(f'Key events need direction -1 or 1, got {self.direction}')
        if self.event_type == InputEventType.POINTER_MOVE and self.position is None:
            raise ValueError('Pointer events need a position')

    def __str__(self) -> str:
        """String representation for debugging."""
        if self.position is not None:
            return (f"InputEvent({self.event_type.value}, "
                    f"pos=({self.position.x:.2f}, {self.position.y:.2f}), t={self.timestamp:.3f})")
        return f"InputEvent({self.event_type.value}, dir={self.direction}, t={self.timestamp:.3f})"
