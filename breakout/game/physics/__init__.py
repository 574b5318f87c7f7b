"""Breakout physics and collision detection."""

from .collision import (
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    check_out_of_bounds,
    step,
)

__all__ = [
    'check_wall_collision',
    'check_paddle_collision',
    'check_brick_collision',
    'check_out_of_bounds',
    'step',
]
