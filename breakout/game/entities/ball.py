"""Ball entity with per-tick velocity physics.

Walls and bricks mirror one velocity component. The paddle sets a new
direction from the strike position. Every bounce keeps the speed magnitude
and only changes direction.
"""

from dataclasses import dataclass
import math
from typing import Tuple


@dataclass
class BallConfig:
    """Ball configuration from layout or defaults."""

    radius: float = 10.0
    speed: float = 4.0            # Launch velocity component in pixels/tick


# Max deviation from vertical when bouncing off the paddle edge
MAX_BOUNCE_ANGLE = math.pi / 3


class Ball:
    """Immutable ball; every move or bounce returns a new Ball."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        dx: float = 0.0,
        dy: float = 0.0,
        visible: bool = True,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            dx: X velocity (pixels/tick)
            dy: Y velocity (pixels/tick)
            visible: Whether ball is drawn and in play
        """
        self._config = config
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy
        self._visible = visible

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.2f}, y={self._y:.2f}, "
                f"dx={self._dx:.2f}, dy={self._dy:.2f}, visible={self._visible})")

    @property
    def config(self) -> BallConfig:
        """Get ball configuration."""
        return self._config

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def dx(self) -> float:
        """Get X velocity."""
        return self._dx

    @property
    def dy(self) -> float:
        """Get Y velocity."""
        return self._dy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def speed(self) -> float:
        """Get current speed magnitude."""
        return math.hypot(self._dx, self._dy)

    @property
    def is_visible(self) -> bool:
        """Check if ball is visible (in play)."""
        return self._visible

    def _replace(self, **changes) -> 'Ball':
        values = {
            'x': self._x, 'y': self._y,
            'dx': self._dx, 'dy': self._dy,
            'visible': self._visible,
        }
        values.update(changes)
        return Ball(self._config, **values)

    def launch(self, x: float, y: float) -> 'Ball':
        """Place ball at a start position moving up and to the right.

        Args:
            x: Start center X
            y: Start center Y

        Returns:
            New Ball with launch velocity (speed, -speed)

        Raises:
            ValueError: If the configured speed is not positive
        """
        if self._config.speed <= 0:
            raise ValueError(f"Ball speed must be positive, got {self._config.speed}")
        return self._replace(x=x, y=y, dx=self._config.speed, dy=-self._config.speed)

    def update(self) -> 'Ball':
        """Advance ball position by one tick of velocity.

        Returns:
            Ball moved by one tick of velocity
        """
        return self._replace(x=self._x + self._dx, y=self._y + self._dy)

    def bounce_horizontal(self) -> 'Ball':
        """Mirror off a side wall.

        Returns:
            Ball with dx negated
        """
        return self._replace(dx=-self._dx)

    def bounce_vertical(self) -> 'Ball':
        """Mirror off the ceiling or a brick.

        Returns:
            Ball with dy negated
        """
        return self._replace(dy=-self._dy)

    def bounce_off_paddle(self, paddle_center_x: float, paddle_width: float) -> 'Ball':
        """Redirect upward by where the paddle was struck.

        Hitting the center bounces straight up, the edges deflect up to
        60 degrees from vertical towards the side that was struck.

        Args:
            paddle_center_x: Paddle center X position
            paddle_width: Paddle width

        Returns:
            New Ball heading upward with the same speed magnitude
        """
        # Offset from paddle center (-1 to 1)
        offset = (self._x - paddle_center_x) / (paddle_width / 2)
        offset = max(-1.0, min(1.0, offset))

        angle = offset * MAX_BOUNCE_ANGLE
        current_speed = self.speed

        return self._replace(
            dx=current_speed * math.sin(angle),
            dy=-current_speed * math.cos(angle),
        )

    def hide(self) -> 'Ball':
        """Return a hidden copy of the ball."""
        return self._replace(visible=False)

    def show(self) -> 'Ball':
        """Return a visible copy of the ball."""
        return self._replace(visible=True)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        return (
            self._x - self._config.radius,
            self._y - self._config.radius,
            self._x + self._config.radius,
            self._y + self._config.radius,
        )
