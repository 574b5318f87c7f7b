"""Geometric skin - flat filled shapes."""

from typing import TYPE_CHECKING, Optional, Tuple

import pygame

from .base import BreakoutSkin
from ...config import BRICK_COLORS, ENTITY_COLOR, HUD_COLOR

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class GeometricSkin(BreakoutSkin):
    """Flat filled shapes in the entity and brick colors.

    - Paddle: filled rectangle
    - Ball: filled circle
    - Bricks: filled rectangles colored by brick.color
    - HUD: score top right, level top left, paddle width top center
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes"

    PADDLE_COLOR = ENTITY_COLOR
    BALL_COLOR = ENTITY_COLOR

    def __init__(self, font_size: int = 20):
        """Initialize geometric skin.

        Args:
            font_size: HUD font size in points
        """
        self._font_size = font_size
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Create the HUD font on first use."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, self._font_size)

    def _get_brick_color(self, brick: 'Brick') -> Tuple[int, int, int]:
        color = BRICK_COLORS.get(brick.color)
        if color is None:
            return ENTITY_COLOR
        return color.as_rgb_tuple

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render paddle as a filled rectangle."""
        if not paddle.is_visible:
            return
        pygame.draw.rect(screen, self.PADDLE_COLOR, pygame.Rect(paddle.rect))

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render ball as a filled circle."""
        if not ball.is_visible:
            return
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(screen, self.BALL_COLOR, pos, max(1, int(ball.radius)))

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render brick as a filled rectangle."""
        if not brick.visible:
            return
        pygame.draw.rect(screen, self._get_brick_color(brick), pygame.Rect(brick.rect))

    def render_hud(
        self,
        screen: pygame.Surface,
        score: int,
        level: int,
        paddle_width: float,
    ) -> None:
        """Render score, level and paddle width."""
        self._ensure_font()
        if not self._font:
            return

        level_text = self._font.render(f"Level: {level}", True, HUD_COLOR)
        screen.blit(level_text, (10, 10))

        width_text = self._font.render(f"Paddle: {paddle_width:.0f}px", True, HUD_COLOR)
        width_rect = width_text.get_rect()
        width_rect.midtop = (screen.get_width() // 2, 10)
        screen.blit(width_text, width_rect)

        score_text = self._font.render(f"Score: {score}", True, HUD_COLOR)
        score_rect = score_text.get_rect()
        score_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(score_text, score_rect)
