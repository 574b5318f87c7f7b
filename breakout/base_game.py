"""Game mode interface shared by the standalone runner and the tests.

A mode describes itself with class attributes (NAME, DESCRIPTION, ...)
and lists its command line options in ARGUMENTS as argparse keyword
dicts, so main.py can build a parser without instantiating anything.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from breakout.game_state import GameState


class BaseGame(ABC):
    """One playable mode driven by the main loop.

    The loop calls, once per tick: handle_input() with the paddle
    events collected since the last tick, update() with the elapsed
    seconds, and render() with the window surface.
    """

    NAME: str = "Game"
    DESCRIPTION: str = ""
    VERSION: str = "0.0.0"
    AUTHOR: str = ""

    # argparse options: {'name': '--flag', **add_argument kwargs}
    ARGUMENTS: List[Dict[str, Any]] = []

    # Options every mode accepts; a mode may redeclare one to change it
    COMMON_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--log-level',
            'type': str,
            'default': None,
            'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
            'help': 'Default log level (overrides BREAKOUT_LOG_LEVEL)'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Mode options followed by the common ones, first declaration wins."""
        by_name: Dict[str, Dict[str, Any]] = {}
        for arg in [*cls.ARGUMENTS, *cls.COMMON_ARGUMENTS]:
            by_name.setdefault(arg['name'], arg)
        return list(by_name.values())

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    def state(self) -> GameState:
        """Externally visible state; modes implement _get_internal_state."""
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        ...

    @abstractmethod
    def get_score(self) -> int:
        ...

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Apply the InputEvents gathered since the previous tick."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance one tick; dt is the elapsed time in seconds."""

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Draw the current state onto screen."""

    def reset(self) -> None:
        """Return to the initial state. No-op unless overridden."""
