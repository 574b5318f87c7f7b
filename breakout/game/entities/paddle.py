"""Paddle entity with blended pointer and keyboard movement.

Each tick the paddle closes a fixed fraction of the gap to the pointer
target and then steps by its keyboard velocity. The result is always
clamped to the surface. While a key is held the target follows the
paddle, otherwise the smoothing term would pin it near the pointer.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class PaddleConfig:
    """Paddle configuration from layout or defaults."""

    width: float = 80.0
    height: float = 10.0
    speed: float = 8.0             # Keyboard step in pixels/tick
    baseline_offset: float = 20.0  # Paddle top sits this far above the bottom edge


class Paddle:
    """Paddle positioned by its left edge.

    Movement combines two inputs:
    - target_x: where the pointer wants the left edge to be
    - dx: keyboard velocity, +speed / -speed while a key is held
    """

    def __init__(
        self,
        config: PaddleConfig,
        surface_width: float,
        surface_height: float,
    ):
        """Initialize paddle centered at the bottom of the surface.

        Args:
            config: Paddle configuration
            surface_width: Surface width in pixels
            surface_height: Surface height in pixels
        """
        self._config = config
        self._surface_width = surface_width
        self._surface_height = surface_height
        self._dx = 0.0
        self._visible = True
        self._x = 0.0
        self._y = 0.0
        self._target_x = 0.0
        self.reset(surface_width, surface_height)

    @property
    def config(self) -> PaddleConfig:
        """Get paddle configuration."""
        return self._config

    @property
    def x(self) -> float:
        """Get paddle left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y position."""
        return self._y

    @property
    def dx(self) -> float:
        """Get keyboard velocity."""
        return self._dx

    @property
    def target_x(self) -> float:
        """Get pointer target for the left edge."""
        return self._target_x

    @property
    def width(self) -> float:
        """Get paddle width."""
        return self._config.width

    @property
    def height(self) -> float:
        """Get paddle height."""
        return self._config.height

    @property
    def speed(self) -> float:
        """Get keyboard step size."""
        return self._config.speed

    @property
    def center_x(self) -> float:
        """Get paddle center X position."""
        return self._x + self._config.width / 2

    @property
    def is_visible(self) -> bool:
        """Check if paddle is visible."""
        return self._visible

    @is_visible.setter
    def is_visible(self, value: bool) -> None:
        self._visible = value

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._config.width, self._config.height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self._x,
            self._y,
            self._x + self._config.width,
            self._y + self._config.height,
        )

    def _clamp(self, x: float) -> float:
        # Upper bound first so an oversized paddle settles at 0
        x = min(x, self._surface_width - self._config.width)
        return max(0.0, x)

    def press(self, direction: int) -> None:
        """Start keyboard movement.

        Args:
            direction: -1 for left, +1 for right
        """
        if direction < 0:
            self._dx = -self._config.speed
        elif direction > 0:
            self._dx = self._config.speed

    def release(self) -> None:
        """Stop keyboard movement."""
        self._dx = 0.0

    def point_at(self, pointer_x: float) -> None:
        """Aim the paddle center at a pointer X coordinate.

        Args:
            pointer_x: Pointer X in surface coordinates
        """
        self._target_x = self._clamp(pointer_x - self._config.width / 2)

    def update(self, smoothing: float) -> None:
        """Move paddle one tick toward its target plus keyboard step.

        Args:
            smoothing: Fraction of the gap to target closed this tick
        """
        new_x = self._x + (self._target_x - self._x) * smoothing + self._dx
        self._x = self._clamp(new_x)

        # Keyboard movement drags the pointer target along with it
        if self._dx:
            self._target_x = self._x

    def reset(self, surface_width: float, surface_height: float) -> None:
        """Reset paddle to its start position centered above the baseline.

        Args:
            surface_width: Current surface width
            surface_height: Current surface height
        """
        self._surface_width = surface_width
        self._surface_height = surface_height
        self._x = self._clamp(surface_width / 2 - self._config.width / 2)
        self._y = surface_height - self._config.baseline_offset
        self._target_x = self._x
        self._dx = 0.0
