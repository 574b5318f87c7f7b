"""
Keyboard/Pointer Input Source - arrow keys, mouse motion and touch drags.

Translates pygame events into InputEvents. Anything it does not consume
is re-posted to the pygame event queue for the main loop.
"""
import time
from typing import Callable, List, Optional

import pygame

from breakout.models import Point2D
from breakout.input.input_event import InputEvent, InputEventType, LEFT, RIGHT
from breakout.input.sources.base import InputSource

DIRECTION_KEYS = {
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


class KeyboardPointerSource(InputSource):
    """Arrow keys plus mouse/touch pointer input."""

    def __init__(
        self,
        window_width: Optional[Callable[[], float]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the source.

        Args:
            window_width: Returns the window width used to convert
                normalized touch coordinates. Defaults to the current
                display surface width.
            clock: Timestamp source
        """
        self._event_queue: List[InputEvent] = []
        self._window_width = window_width
        self._clock = clock

    def _get_window_width(self) -> Optional[float]:
        if self._window_width is not None:
            return self._window_width()
        surface = pygame.display.get_surface()
        if surface is None:
            return None
        return float(surface.get_width())

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def feed(self, event: pygame.event.Event) -> bool:
        """Translate one pygame event.

        Returns:
            True if the event was consumed as paddle input
        """
        now = self._clock()

        if event.type == pygame.KEYDOWN and event.key in DIRECTION_KEYS:
            self._event_queue.append(InputEvent(
                event_type=InputEventType.KEY_DOWN,
                timestamp=now,
                direction=DIRECTION_KEYS[event.key],
            ))
            return True

        if event.type == pygame.KEYUP and event.key in DIRECTION_KEYS:
            self._event_queue.append(InputEvent(
                event_type=InputEventType.KEY_UP,
                timestamp=now,
            ))
            return True

        if event.type == pygame.MOUSEMOTION:
            pos_x, pos_y = event.pos
            self._event_queue.append(InputEvent(
                event_type=InputEventType.POINTER_MOVE,
                timestamp=now,
                position=Point2D(x=float(pos_x), y=float(pos_y)),
            ))
            return True

        if event.type == pygame.FINGERMOTION:
            width = self._get_window_width()
            if width is None:
                return True
            # Touch coordinates are normalized to the window
            self._event_queue.append(InputEvent(
                event_type=InputEventType.POINTER_MOVE,
                timestamp=now,
                position=Point2D(x=event.x * width, y=0.0),
            ))
            return True

        return False

    def update(self, dt: float) -> None:
        """Process pygame events and collect paddle input."""
        for event in pygame.event.get():
            if not self.feed(event):
                # Re-post non-input events for the main loop to handle
                pygame.event.post(event)
