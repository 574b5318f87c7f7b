"""
Tests for BreakoutMode: input mapping, ticking, state and rendering.
"""

import pygame
import pytest
from pydantic import ValidationError

from breakout.config import BACKGROUND_COLOR, ENTITY_COLOR
from breakout.game_mode import BreakoutMode
from breakout.game_state import GameState
from breakout.game.world import GameEvent
from breakout.input import InputEvent, InputEventType, LEFT, RIGHT
from breakout.models import Point2D


@pytest.fixture
def game(level_table):
    return BreakoutMode(width=800, height=600, level_table=level_table)


def key_down(direction):
    return InputEvent(event_type=InputEventType.KEY_DOWN, timestamp=0.0, direction=direction)


def key_up():
    return InputEvent(event_type=InputEventType.KEY_UP, timestamp=0.0)


def pointer(x):
    return InputEvent(event_type=InputEventType.POINTER_MOVE, timestamp=0.0, position=Point2D(x=x, y=0))


class TestSetup:

    def test_default_table(self):
        game = BreakoutMode()
        assert game.controller.max_level == 5
        assert game.level == 1

    def test_levels_path(self, tmp_path):
        path = tmp_path / "one.yaml"
        path.write_text("levels:\n  - rows: 2\n    columns: 4\n")
        game = BreakoutMode(levels=str(path))
        assert (game.bricks.rows, game.bricks.columns) == (2, 4)

    def test_compact_viewport(self, level_table):
        game = BreakoutMode(width=400, height=800, level_table=level_table)
        assert game.surface.width == pytest.approx(380)
        assert game.layout.profile.name == 'compact'

    def test_zero_viewport_rejected(self, level_table):
        with pytest.raises(ValidationError):
            BreakoutMode(width=0, height=600, level_table=level_table)

    def test_info(self):
        info = BreakoutMode.get_info()
        names = [arg['name'] for arg in info['arguments']]
        assert info['name'] == "Breakout"
        assert names == ['--skin', '--levels', '--transition-delay', '--log-level']


class TestInput:

    def test_key_down_and_up(self, game):
        game.handle_input([key_down(RIGHT)])
        assert game.paddle.dx == 8
        game.handle_input([key_up()])
        assert game.paddle.dx == 0

    def test_left_key(self, game):
        game.handle_input([key_down(LEFT)])
        game.update(0.016)
        assert game.paddle.x == 352

    def test_pointer_sets_target(self, game):
        game.handle_input([pointer(600)])
        assert game.paddle.target_x == 560
        game.update(0.016)
        assert game.paddle.x == pytest.approx(360 + 200 * 0.2)


class TestUpdate:

    def test_update_moves_ball(self, game):
        game.update(0.016)
        assert (game.ball.x, game.ball.y) == (404, 296)
        assert game.state == GameState.PLAYING

    def test_transition_state(self, game):
        game.controller.begin_transition(game.world)
        assert game.state == GameState.LEVEL_TRANSITION
        game.update(0.5)
        assert GameEvent.LEVEL_UP in game.last_events
        assert game.state == GameState.PLAYING
        assert game.level == 2

    def test_reset_goes_back_to_level_one(self, game):
        game.controller.begin_transition(game.world)
        game.update(0.5)
        game.world.score = 4

        game.reset()

        assert game.level == 1
        assert game.get_score() == 0
        assert game.last_events == []

    def test_resize(self, game):
        game.resize(400, 800)
        assert game.surface.width == pytest.approx(380)
        assert game.paddle.width == pytest.approx(38)


class TestRender:

    @pytest.fixture
    def screen(self):
        return pygame.Surface((800, 600))

    def test_draws_entities(self, game, screen):
        game.render(screen)
        assert screen.get_at((400, 300))[:3] == ENTITY_COLOR
        assert screen.get_at((400, 585))[:3] == ENTITY_COLOR
        assert screen.get_at((80, 70))[:3] == ENTITY_COLOR
        assert screen.get_at((5, 400))[:3] == BACKGROUND_COLOR

    def test_hit_brick_not_drawn(self, game, screen):
        game.bricks.hit(0, 0)
        game.render(screen)
        assert screen.get_at((80, 70))[:3] == BACKGROUND_COLOR

    def test_hidden_during_transition(self, game, screen):
        game.controller.begin_transition(game.world)
        game.render(screen)
        assert screen.get_at((400, 300))[:3] == BACKGROUND_COLOR
        assert screen.get_at((400, 585))[:3] == BACKGROUND_COLOR
