"""
Tests for level progression: transitions, resets, restarts and resizes.
"""

import pytest

from breakout.game.entities import Ball
from breakout.game.world import GameEvent, StepResult
from breakout.models import Resolution


def clear_all(world, keep=None):
    """Hide every brick except the optional (row, col) in keep."""
    for brick in world.bricks:
        if brick.grid_position != keep:
            world.bricks.hit(*brick.grid_position)


def place_ball(world, x, y, dx, dy):
    world.ball = Ball(world.ball.config, x, y, dx=dx, dy=dy)


class TestNewWorld:

    def test_starts_at_level_one(self, world):
        assert world.level == 1
        assert world.score == 0
        assert world.clock == 0.0
        assert not world.in_transition

    def test_entities_at_start(self, world):
        assert (world.bricks.rows, world.bricks.columns) == (5, 9)
        assert world.bricks.visible_count == 45
        assert (world.ball.x, world.ball.y) == (400, 300)
        assert world.paddle.width == 80
        assert world.ball.is_visible
        assert world.paddle.is_visible


class TestBeginTransition:

    def test_hides_ball_and_paddle(self, controller, world):
        assert controller.begin_transition(world)
        assert not world.ball.is_visible
        assert not world.paddle.is_visible
        assert world.pending.deadline == pytest.approx(0.5)

    def test_deadline_relative_to_clock(self, controller, world):
        world.clock = 3.0
        controller.begin_transition(world)
        assert world.pending.deadline == pytest.approx(3.5)

    def test_scheduled_at_most_once(self, controller, world):
        assert controller.begin_transition(world)
        deadline = world.pending.deadline
        world.clock = 0.2
        assert not controller.begin_transition(world)
        assert world.pending.deadline == deadline

    def test_hidden_entities_block_scheduling(self, controller, world):
        world.ball = world.ball.hide()
        world.paddle.is_visible = False
        assert not controller.begin_transition(world)
        assert world.pending is None

    def test_observe_schedules_only_when_cleared(self, controller, world):
        assert controller.observe(world, StepResult()) == []
        clear_all(world)
        assert controller.observe(world, StepResult()) == [GameEvent.LEVEL_CLEARED]
        assert controller.observe(world, StepResult()) == []


class TestAdvance:

    def test_clock_accumulates_dt(self, controller, world):
        controller.advance(world, 0.25)
        controller.advance(world, 0.25)
        assert world.clock == pytest.approx(0.5)

    def test_physics_runs_while_playing(self, controller, world):
        controller.advance(world, 0.016)
        assert (world.ball.x, world.ball.y) == (404, 296)

    def test_physics_frozen_during_transition(self, controller, world):
        controller.begin_transition(world)
        before = (world.ball.x, world.ball.y, world.paddle.x)
        world.paddle.press(1)
        events = controller.advance(world, 0.1)
        assert events == []
        assert (world.ball.x, world.ball.y, world.paddle.x) == before

    def test_last_brick_hit_starts_transition(self, controller, world):
        """Hitting the only visible brick clears the level on the same tick."""
        clear_all(world, keep=(4, 0))
        place_ball(world, 80, 212, 0, -4)

        events = controller.advance(world, 0.016)

        assert GameEvent.BRICK_HIT in events
        assert GameEvent.LEVEL_CLEARED in events
        assert world.score == 1
        assert world.in_transition
        assert not world.ball.is_visible
        assert not world.paddle.is_visible

    def test_level_up_fires_after_delay(self, controller, world):
        clear_all(world)
        controller.observe(world, StepResult())

        assert controller.advance(world, 0.25) == []
        assert world.level == 1
        assert world.in_transition

        events = controller.advance(world, 0.25)

        assert events[0] == GameEvent.LEVEL_UP
        assert world.level == 2
        assert not world.in_transition
        assert (world.bricks.rows, world.bricks.columns) == (6, 9)
        assert world.bricks.visible_count == 54
        assert world.paddle.width == 70
        assert world.score == 0
        assert world.ball.is_visible
        assert world.paddle.is_visible

    def test_clearing_max_level_is_victory(self, controller, world):
        world.level = controller.max_level
        clear_all(world)
        controller.observe(world, StepResult())

        events = controller.advance(world, 0.5)

        assert events[0] == GameEvent.VICTORY
        assert world.level == 1
        assert (world.bricks.rows, world.bricks.columns) == (5, 9)
        assert world.paddle.width == 80


class TestBallLost:

    def test_reset_is_immediate(self, controller, world):
        world.bricks.hit(0, 0)
        world.score = 7
        place_ball(world, 100, 595, 0, 4)

        events = controller.advance(world, 0.016)

        assert GameEvent.BALL_LOST in events
        assert world.score == 0
        assert world.bricks.visible_count == 45
        assert (world.ball.x, world.ball.y) == (400, 300)
        assert (world.ball.dx, world.ball.dy) == (4, -4)
        assert world.paddle.x == 360
        assert not world.in_transition

    def test_reset_keeps_current_level(self, controller, world):
        clear_all(world)
        controller.observe(world, StepResult())
        controller.advance(world, 0.5)
        assert world.level == 2

        place_ball(world, 100, 595, 0, 4)
        controller.advance(world, 0.016)

        assert world.level == 2
        assert world.bricks.rows == 6
        assert world.paddle.width == 70

    def test_lost_ball_beats_cleared_grid(self, controller, world):
        """A ball lost on the same tick as the grid empties resets instead."""
        clear_all(world)
        place_ball(world, 100, 595, 0, 4)

        events = controller.advance(world, 0.016)

        assert GameEvent.LEVEL_CLEARED not in events
        assert not world.in_transition
        assert world.bricks.visible_count == 45


class TestRestart:

    def test_restart_returns_to_level_one(self, controller, world):
        world.level = 2
        world.score = 12
        controller.begin_transition(world)

        controller.restart(world)

        assert world.level == 1
        assert world.score == 0
        assert not world.in_transition
        assert world.ball.is_visible
        assert world.paddle.is_visible
        assert world.paddle.width == 80


class TestResize:

    def test_resize_rescales_and_keeps_progress(self, controller, world):
        world.bricks.hit(0, 0)
        world.bricks.hit(2, 3)
        world.score = 2

        layout = controller.resize(world, Resolution(width=400, height=800))

        assert world.surface == layout.surface
        assert world.surface.width == pytest.approx(380)
        assert world.score == 2
        assert world.bricks.visible_count == 43
        assert not world.bricks[0, 0].visible
        assert not world.bricks[2, 3].visible
        assert world.bricks[0, 1].x == pytest.approx(125 * 0.475)
        assert world.paddle.width == pytest.approx(38)
        assert world.ball.speed == pytest.approx(5 * 2 ** 0.5)

    def test_resize_back_restores_desktop(self, controller, world):
        controller.resize(world, Resolution(width=400, height=800))
        controller.resize(world, Resolution(width=1024, height=768))
        assert (world.surface.width, world.surface.height) == (800, 600)
        assert world.paddle.width == 80

    def test_resize_during_transition_keeps_entities_hidden(self, controller, world):
        controller.begin_transition(world)
        controller.resize(world, Resolution(width=500, height=700))
        assert world.in_transition
        assert not world.ball.is_visible
        assert not world.paddle.is_visible
