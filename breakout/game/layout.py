"""Responsive layout for Breakout.

Turns a viewport size and a level into concrete surface dimensions,
scale factors and entity configs. compute_layout() is a pure function
of its inputs, so recomputing with unchanged inputs yields an equal
Layout.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from breakout.config import (
    REFERENCE_WIDTH, REFERENCE_HEIGHT,
    COMPACT_BREAKPOINT, COMPACT_WIDTH_FRACTION,
    BALL_RADIUS,
    PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_BASELINE_OFFSET,
    BRICK_WIDTH, BRICK_HEIGHT, BRICK_PADDING, GRID_OFFSET_X, GRID_OFFSET_Y,
    ViewportProfile, get_viewport_profile,
)
from breakout.logging import get_logger
from breakout.models import Resolution

from .entities import Ball, BallConfig, BrickGrid, Paddle, PaddleConfig
from .level_loader import LevelSpec

log = get_logger('layout')


def compute_surface(viewport: Resolution) -> Tuple[Resolution, ViewportProfile]:
    """Pick the drawing surface size for a viewport.

    Narrow viewports get a surface 95% of their width with the reference
    aspect ratio; anything wider gets the reference resolution.

    Args:
        viewport: Available viewport size

    Returns:
        Tuple of (surface size, viewport profile)
    """
    if viewport.width <= COMPACT_BREAKPOINT:
        width = viewport.width * COMPACT_WIDTH_FRACTION
        height = width * (REFERENCE_HEIGHT / REFERENCE_WIDTH)
        return Resolution(width=width, height=height), get_viewport_profile('compact')
    return (
        Resolution(width=REFERENCE_WIDTH, height=REFERENCE_HEIGHT),
        get_viewport_profile('desktop'),
    )


@dataclass(frozen=True)
class Layout:
    """Everything the game needs to place entities on one surface.

    Attributes:
        surface: Drawing surface size
        profile: Viewport profile the surface was chosen with
        scale_x: surface width / reference width
        scale_y: surface height / reference height
        level: Level the grid and paddle width come from
        paddle: Scaled paddle config
        ball: Scaled ball config
        brick_width: Scaled brick width
        brick_height: Scaled brick height
        brick_padding: Scaled gap between bricks
        grid_offset_x: Scaled X of the first column
        grid_offset_y: Scaled Y of the first row
    """
    surface: Resolution
    profile: ViewportProfile
    scale_x: float
    scale_y: float
    level: LevelSpec
    paddle: PaddleConfig
    ball: BallConfig
    brick_width: float
    brick_height: float
    brick_padding: float
    grid_offset_x: float
    grid_offset_y: float

    @property
    def ball_start(self) -> Tuple[float, float]:
        """Get ball start position (surface center)."""
        return (self.surface.width / 2, self.surface.height / 2)

    def build_grid(self) -> BrickGrid:
        """Create a fresh grid of visible bricks for this layout's level."""
        return BrickGrid.build(
            rows=self.level.rows,
            columns=self.level.columns,
            brick_width=self.brick_width,
            brick_height=self.brick_height,
            padding=self.brick_padding,
            offset_x=self.grid_offset_x,
            offset_y=self.grid_offset_y,
            color=self.level.color,
        )

    def make_paddle(self) -> Paddle:
        """Create a paddle at its start position."""
        return Paddle(self.paddle, self.surface.width, self.surface.height)

    def make_ball(self) -> Ball:
        """Create a ball at its start position with launch velocity."""
        x, y = self.ball_start
        return Ball(self.ball, x, y).launch(x, y)


def compute_layout(
    viewport: Resolution,
    level: LevelSpec,
    paddle_width: Optional[float] = None,
) -> Layout:
    """Compute surface size, scale factors and scaled entity configs.

    Args:
        viewport: Available viewport size
        level: Level to lay out
        paddle_width: Unscaled paddle width, already floored by the level
            table (LevelTable.paddle_width_for). Defaults to the level's own.

    Returns:
        Layout for this viewport and level
    """
    surface, profile = compute_surface(viewport)
    scale_x = surface.width / REFERENCE_WIDTH
    scale_y = surface.height / REFERENCE_HEIGHT

    if paddle_width is None:
        paddle_width = level.paddle_width

    layout = Layout(
        surface=surface,
        profile=profile,
        scale_x=scale_x,
        scale_y=scale_y,
        level=level,
        paddle=PaddleConfig(
            width=paddle_width * scale_x,
            height=PADDLE_HEIGHT * scale_y,
            speed=PADDLE_SPEED * scale_x,
            baseline_offset=PADDLE_BASELINE_OFFSET * scale_y,
        ),
        ball=BallConfig(
            radius=BALL_RADIUS * min(scale_x, scale_y),
            speed=profile.ball_speed,
        ),
        brick_width=BRICK_WIDTH * scale_x,
        brick_height=BRICK_HEIGHT * scale_y,
        brick_padding=BRICK_PADDING * scale_x,
        grid_offset_x=GRID_OFFSET_X * scale_x,
        grid_offset_y=GRID_OFFSET_Y * scale_y,
    )

    log.debug(
        "Layout %s for viewport %s (%s, scale %.3f x %.3f)",
        layout.surface, viewport, profile.name, scale_x, scale_y,
    )
    return layout
