"""
Input source interface.

A source turns some device into InputEvents. The main loop calls
update() once per tick and hands poll_events() to the game.
"""
from abc import ABC, abstractmethod
from typing import List

from breakout.input.input_event import InputEvent


class InputSource(ABC):
    """Producer of paddle InputEvents."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Return and forget the events queued since the previous call."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Read the device and queue whatever it reported this tick."""

    def clear(self) -> None:
        """Drop any queued events."""
        self.poll_events()
