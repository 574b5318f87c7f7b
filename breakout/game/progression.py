"""Progression controller for Breakout.

States:
    Playing          - physics runs every tick
    LevelTransition  - grid cleared, ball and paddle hidden, waiting for
                       the deferred level change to fire
    Reset            - ball fell off the bottom; handled immediately and
                       play continues on the same tick boundary

The deferred level change is a PendingTransition stored on the World
and polled once per tick against the world clock, so tests drive time
by choosing dt.
"""

from typing import List, Optional

from breakout.config import TRANSITION_DELAY
from breakout.logging import get_logger
from breakout.models import Resolution

from .layout import Layout, compute_layout
from .level_loader import LevelTable
from .physics import step
from .world import GameEvent, PendingTransition, StepResult, World

log = get_logger('progression')


class ProgressionController:
    """Owns level rules and the layout; mutates the World it is given."""

    def __init__(
        self,
        table: LevelTable,
        viewport: Resolution,
        delay: float = TRANSITION_DELAY,
    ):
        """Initialize controller.

        Args:
            table: Level table to progress through
            viewport: Initial viewport size
            delay: Seconds between clearing a grid and the next level
        """
        self._table = table
        self._viewport = viewport
        self._delay = delay
        self._layout: Layout = compute_layout(
            viewport, table.get_level(1), table.paddle_width_for(1)
        )

    @property
    def table(self) -> LevelTable:
        """Get the level table."""
        return self._table

    @property
    def layout(self) -> Layout:
        """Get the current layout."""
        return self._layout

    @property
    def delay(self) -> float:
        """Get the transition delay in seconds."""
        return self._delay

    @property
    def max_level(self) -> int:
        """Get the highest level number."""
        return self._table.max_level

    def _relayout(self, level: int) -> Layout:
        self._layout = compute_layout(
            self._viewport,
            self._table.get_level(level),
            self._table.paddle_width_for(level),
        )
        return self._layout

    def new_world(self) -> World:
        """Create a world at level 1 with everything in its start position."""
        layout = self._relayout(1)
        return World(
            surface=layout.surface,
            ball=layout.make_ball(),
            paddle=layout.make_paddle(),
            bricks=layout.build_grid(),
        )

    def _restart_entities(self, world: World, layout: Layout) -> None:
        """Fresh grid, zero score, ball and paddle back at the start."""
        world.surface = layout.surface
        world.bricks = layout.build_grid()
        world.score = 0
        world.paddle = layout.make_paddle()
        world.ball = layout.make_ball()

    # =========================================================================
    # Tick
    # =========================================================================

    def advance(self, world: World, dt: float) -> List[GameEvent]:
        """Run one tick: advance the clock, fire due transitions, step physics.

        Physics is skipped while a level transition is pending.

        Args:
            world: Game world
            dt: Seconds since the previous tick

        Returns:
            Events that happened this tick
        """
        world.clock += dt
        events = self.poll(world)

        if world.in_transition:
            return events

        result = step(world)
        events.extend(result.events)
        events.extend(self.observe(world, result))
        return events

    def observe(self, world: World, result: StepResult) -> List[GameEvent]:
        """React to a physics step: reset on a lost ball, schedule on a clear.

        Args:
            world: Game world after the step
            result: What the step reported

        Returns:
            Progression events triggered by this step
        """
        if result.ball_lost:
            self.reset(world)
            return []

        if world.bricks.all_cleared and self.begin_transition(world):
            return [GameEvent.LEVEL_CLEARED]

        return []

    # =========================================================================
    # Transitions
    # =========================================================================

    def begin_transition(self, world: World) -> bool:
        """Hide ball and paddle and schedule the deferred level change.

        Does nothing if a transition is already pending or the ball and
        paddle are already hidden.

        Returns:
            True if a transition was scheduled
        """
        if world.pending is not None:
            return False
        if not world.ball.is_visible and not world.paddle.is_visible:
            return False

        world.ball = world.ball.hide()
        world.paddle.is_visible = False
        world.pending = PendingTransition(deadline=world.clock + self._delay)
        log.info("Level %d cleared, next level at t=%.3f", world.level, world.pending.deadline)
        return True

    def poll(self, world: World) -> List[GameEvent]:
        """Fire the pending transition if its deadline has passed.

        Returns:
            [LEVEL_UP] or [VICTORY] if it fired, else []
        """
        pending: Optional[PendingTransition] = world.pending
        if pending is None or world.clock < pending.deadline:
            return []

        world.pending = None

        if world.level < self.max_level:
            world.level += 1
            event = GameEvent.LEVEL_UP
            log.info("Advancing to level %d", world.level)
        else:
            world.level = 1
            event = GameEvent.VICTORY
            log.info("Final level cleared, starting over at level 1")

        # New entities are created visible
        self._restart_entities(world, self._relayout(world.level))
        return [event]

    def reset(self, world: World) -> None:
        """Return to the start of the current level immediately.

        Used when the ball falls past the bottom edge.
        """
        log.info("Ball lost on level %d with score %d, resetting", world.level, world.score)
        world.pending = None
        self._restart_entities(world, self._layout)

    def restart(self, world: World) -> None:
        """Start over from level 1."""
        world.level = 1
        world.pending = None
        self._restart_entities(world, self._relayout(1))

    def resize(self, world: World, viewport: Resolution) -> Layout:
        """Recompute the layout for a new viewport.

        The grid is rebuilt at the new scale; bricks already hit stay
        hidden and the score is kept. Ball and paddle return to their
        start positions, keeping their visibility so a pending
        transition stays hidden.

        Args:
            world: Game world
            viewport: New viewport size

        Returns:
            The new layout
        """
        self._viewport = viewport
        layout = self._relayout(world.level)

        hidden = [brick.grid_position for brick in world.bricks if not brick.visible]
        grid = layout.build_grid()
        for row, col in hidden:
            if row < grid.rows and col < grid.columns:
                grid.hit(row, col)

        ball_visible = world.ball.is_visible
        paddle_visible = world.paddle.is_visible

        world.surface = layout.surface
        world.bricks = grid
        world.paddle = layout.make_paddle()
        world.paddle.is_visible = paddle_visible
        world.ball = layout.make_ball()
        if not ball_visible:
            world.ball = world.ball.hide()

        log.debug("Resized to %s", layout.surface)
        return layout
