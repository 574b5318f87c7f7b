"""Collision detection and physics for Breakout.

Handles ball-wall, ball-paddle, and ball-brick collisions and the
per-tick step that strings them together.
"""

from typing import TYPE_CHECKING, Tuple

from breakout.config import PADDLE_SMOOTHING
from breakout.logging import get_logger

from ..world import GameEvent, StepResult

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick
    from ..world import World

log = get_logger('physics')


def _overlaps(
    ball: 'Ball',
    bounds: Tuple[float, float, float, float],
) -> bool:
    """Strict AABB overlap between the ball's box and a rectangle."""
    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    left, top, right, bottom = bounds
    return (ball_right > left and ball_left < right and
            ball_bottom > top and ball_top < bottom)


def check_wall_collision(
    ball: 'Ball',
    surface_width: float,
) -> Tuple['Ball', bool]:
    """Check and handle ball-wall collisions.

    Side walls reverse X velocity and the ceiling reverses Y velocity.
    The velocity is pointed away from the wall that was crossed, so a
    ball still overlapping on the next tick is not flipped back in.
    The bottom edge never reflects; see check_out_of_bounds.

    Args:
        ball: Ball to check
        surface_width: Surface width in pixels

    Returns:
        Tuple of (updated ball, True if any wall was hit)
    """
    new_ball = ball
    hit = False

    # Left wall
    if ball.x - ball.radius < 0 and ball.dx < 0:
        new_ball = new_ball.bounce_horizontal()
        hit = True

    # Right wall
    elif ball.x + ball.radius > surface_width and ball.dx > 0:
        new_ball = new_ball.bounce_horizontal()
        hit = True

    # Top wall (ceiling)
    if ball.y - ball.radius < 0 and ball.dy < 0:
        new_ball = new_ball.bounce_vertical()
        hit = True

    return new_ball, hit


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball overlaps the paddle.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    if not paddle.is_visible:
        return False
    return _overlaps(ball, paddle.get_bounds())


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if ball overlaps a visible brick.

    Args:
        ball: Ball to check
        brick: Brick to check against

    Returns:
        True if ball hits brick
    """
    if not brick.visible:
        return False
    return _overlaps(ball, brick.get_bounds())


def check_out_of_bounds(ball: 'Ball', surface_height: float) -> bool:
    """Check if the ball's bottom edge has passed the bottom of the surface."""
    return ball.y + ball.radius > surface_height


def step(world: 'World', smoothing: float = PADDLE_SMOOTHING) -> StepResult:
    """Advance paddle and ball by one tick and resolve collisions.

    Order: paddle motion, ball translation, walls, paddle, bricks,
    out-of-bounds. Bricks are tested in row-major order and every
    overlapping brick is resolved, each one reversing Y velocity.

    The world is mutated in place (ball replaced, bricks hidden, score
    incremented). A lost ball is reported, not handled; the caller
    decides what a reset means.

    Args:
        world: Game world to advance
        smoothing: Fraction of the pointer gap the paddle closes

    Returns:
        StepResult with the events of this tick
    """
    result = StepResult()

    world.paddle.update(smoothing)

    ball = world.ball.update()

    ball, hit_wall = check_wall_collision(ball, world.surface.width)
    if hit_wall:
        result.events.append(GameEvent.WALL_HIT)

    if check_paddle_collision(ball, world.paddle):
        ball = ball.bounce_off_paddle(world.paddle.center_x, world.paddle.width)
        result.events.append(GameEvent.PADDLE_HIT)

    for brick in world.bricks:
        if not check_brick_collision(ball, brick):
            continue
        row, col = brick.grid_position
        world.bricks.hit(row, col)
        world.score += 1
        ball = ball.bounce_vertical()
        result.bricks_hit.append((row, col))
        result.events.append(GameEvent.BRICK_HIT)
        log.trace("Brick %s hit, score %d", (row, col), world.score)

    world.ball = ball

    if check_out_of_bounds(ball, world.surface.height):
        result.ball_lost = True
        result.events.append(GameEvent.BALL_LOST)

    return result
