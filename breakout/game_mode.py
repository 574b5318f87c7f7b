"""Breakout - classic paddle, ball and brick grid.

Features:
- Pointer tracking blended with keyboard stepping for the paddle
- Angled paddle bounces that keep the ball's speed
- Level table from YAML: bigger grids and narrower paddles as you climb
- Responsive layout that rescales everything when the viewport changes
"""

from pathlib import Path
from typing import Dict, List, Optional

import pygame

from breakout.base_game import BaseGame
from breakout.config import REFERENCE_WIDTH, REFERENCE_HEIGHT, BACKGROUND_COLOR, TRANSITION_DELAY
from breakout.game_state import GameState
from breakout.input import InputEvent, InputEventType
from breakout.logging import get_logger
from breakout.models import Resolution

from .game.entities import Ball, BrickGrid, Paddle
from .game.layout import Layout
from .game.level_loader import LevelLoader, LevelTable
from .game.progression import ProgressionController
from .game.skins import BreakoutSkin, GeometricSkin
from .game.world import GameEvent, World

log = get_logger('game_mode')


class BreakoutMode(BaseGame):
    """Breakout game mode.

    Owns one World and one ProgressionController. Each update() is one
    tick: the controller advances the clock, fires any due level change
    and otherwise steps the physics.
    """

    NAME = "Breakout"
    DESCRIPTION = "Clear the brick grid without letting the ball past the paddle."
    VERSION = "1.0.0"
    AUTHOR = "Breakout Team"

    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin (geometric=flat shapes)'
        },
        {
            'name': '--levels',
            'type': str,
            'default': None,
            'help': 'Path to a level table YAML (default: packaged Classic table)'
        },
        {
            'name': '--transition-delay',
            'type': float,
            'default': TRANSITION_DELAY,
            'help': 'Seconds between clearing a level and the next one'
        },
    ]

    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        skin: str = 'geometric',
        levels: Optional[str] = None,
        transition_delay: float = TRANSITION_DELAY,
        width: float = REFERENCE_WIDTH,
        height: float = REFERENCE_HEIGHT,
        level_table: Optional[LevelTable] = None,
        **kwargs,
    ):
        """Initialize Breakout.

        Args:
            skin: Visual skin to use
            levels: Path to a level table YAML file
            transition_delay: Seconds between level clear and next level
            width: Viewport width
            height: Viewport height
            level_table: Pre-loaded level table (takes precedence over levels)
            **kwargs: Ignored extra CLI options

        Raises:
            pydantic.ValidationError: If width or height is not positive
            FileNotFoundError: If the levels file doesn't exist
            LevelLoadError: If the levels file is invalid
        """
        if level_table is None:
            loader = LevelLoader()
            level_table = loader.load_file(Path(levels)) if levels else loader.load()

        viewport = Resolution(width=width, height=height)
        self._controller = ProgressionController(level_table, viewport, transition_delay)
        self._world: World = self._controller.new_world()
        self._last_events: List[GameEvent] = []

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: BreakoutSkin = skin_class()

        log.info(
            "Started '%s' (%d levels) on %s",
            level_table.name, level_table.max_level, self._world.surface,
        )

    # =========================================================================
    # State access
    # =========================================================================

    @property
    def world(self) -> World:
        """Get the game world."""
        return self._world

    @property
    def controller(self) -> ProgressionController:
        """Get the progression controller."""
        return self._controller

    @property
    def layout(self) -> Layout:
        """Get the current layout."""
        return self._controller.layout

    @property
    def surface(self) -> Resolution:
        """Get the drawing surface size."""
        return self._world.surface

    @property
    def ball(self) -> Ball:
        return self._world.ball

    @property
    def paddle(self) -> Paddle:
        return self._world.paddle

    @property
    def bricks(self) -> BrickGrid:
        return self._world.bricks

    @property
    def level(self) -> int:
        """Get current level."""
        return self._world.level

    @property
    def last_events(self) -> List[GameEvent]:
        """Get events from the most recent update()."""
        return list(self._last_events)

    def _get_internal_state(self) -> GameState:
        if self._world.in_transition:
            return GameState.LEVEL_TRANSITION
        return GameState.PLAYING

    def get_score(self) -> int:
        """Get current score."""
        return self._world.score

    # =========================================================================
    # Loop
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Apply paddle input.

        Key down starts keyboard movement, key up stops it and pointer
        motion sets the paddle target.

        Args:
            events: List of input events
        """
        paddle = self._world.paddle
        for event in events:
            if event.event_type == InputEventType.KEY_DOWN:
                paddle.press(event.direction)
            elif event.event_type == InputEventType.KEY_UP:
                paddle.release()
            elif event.event_type == InputEventType.POINTER_MOVE and event.position is not None:
                paddle.point_at(event.position.x)

    def update(self, dt: float) -> None:
        """Run one tick.

        Args:
            dt: Delta time in seconds
        """
        self._last_events = self._controller.advance(self._world, dt)

    def resize(self, width: float, height: float) -> Layout:
        """Respond to a viewport size change.

        Raises:
            pydantic.ValidationError: If width or height is not positive
        """
        return self._controller.resize(self._world, Resolution(width=width, height=height))

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        screen.fill(BACKGROUND_COLOR)

        for brick in self._world.bricks:
            self._skin.render_brick(brick, screen)

        self._skin.render_paddle(self._world.paddle, screen)
        self._skin.render_ball(self._world.ball, screen)

        self._skin.render_hud(
            screen,
            self._world.score,
            self._world.level,
            self._world.paddle.width,
        )

    def reset(self) -> None:
        """Reset game to level 1."""
        super().reset()
        self._controller.restart(self._world)
        self._last_events = []
        log.info("Game restarted")
