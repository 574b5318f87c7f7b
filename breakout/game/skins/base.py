"""Base class for Breakout skins.

A skin decides how entities look; the game mode only tells it what to draw
and in which order.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class BreakoutSkin(ABC):
    """Base class for game skins.

    Skins paint the current entity state once per tick. Hidden entities
    are skipped, not drawn transparent.
    """

    NAME: str = "base"
    DESCRIPTION: str = ""

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render a brick.

        Args:
            brick: Brick to render
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(
        self,
        screen: pygame.Surface,
        score: int,
        level: int,
        paddle_width: float,
    ) -> None:
        """Render the heads-up display.

        Args:
            screen: Pygame surface to draw on
            score: Current score
            level: Current level
            paddle_width: Current paddle width in pixels
        """
        pass
