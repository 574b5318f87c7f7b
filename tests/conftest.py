"""Shared fixtures for Breakout tests."""
import os

# Headless pygame for surfaces, fonts and events
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

import breakout.logging as breakout_logging
from breakout.game.entities import Ball, BallConfig, BrickGrid, Paddle, PaddleConfig
from breakout.game.level_loader import LevelSpec, LevelTable
from breakout.game.progression import ProgressionController
from breakout.game.world import World
from breakout.models import Resolution


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence logging for a test and restore the previous config after."""
    saved = breakout_logging.snapshot_config()
    breakout_logging.disable_logging()
    yield
    breakout_logging.restore_config(saved)


@pytest.fixture
def level_table() -> LevelTable:
    """Two-level table: 5x9 then 6x9 with a narrower paddle."""
    return LevelTable(
        name="Test",
        min_paddle_width=40,
        levels=[
            LevelSpec(name="One", rows=5, columns=9, paddle_width=80, color="blue"),
            LevelSpec(name="Two", rows=6, columns=9, paddle_width=70, color="green"),
        ],
    )


@pytest.fixture
def desktop() -> Resolution:
    return Resolution(width=800, height=600)


@pytest.fixture
def controller(level_table, desktop) -> ProgressionController:
    return ProgressionController(level_table, desktop, delay=0.5)


@pytest.fixture
def world(controller) -> World:
    return controller.new_world()


@pytest.fixture
def make_world():
    """Factory for a hand-built 800x600 world.

    Defaults: 80px paddle centered at the bottom, a single-row grid of
    three bricks at y=60..80 starting at x=45.
    """
    def _make(ball: Ball, paddle: Paddle = None, bricks: BrickGrid = None) -> World:
        if paddle is None:
            paddle = Paddle(PaddleConfig(width=80, height=10, speed=8), 800, 600)
        if bricks is None:
            bricks = BrickGrid.build(
                rows=1, columns=3,
                brick_width=70, brick_height=20, padding=10,
                offset_x=45, offset_y=60,
            )
        return World(
            surface=Resolution(width=800, height=600),
            ball=ball,
            paddle=paddle,
            bricks=bricks,
        )
    return _make


@pytest.fixture
def ball_config() -> BallConfig:
    return BallConfig(radius=10, speed=4)
