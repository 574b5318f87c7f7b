"""
Pydantic data models shared across Breakout.

Usage:
    >>> from breakout.models import Point2D, Resolution, Color
"""

from .primitives import (
    Point2D,
    Resolution,
    Color,
)

__all__ = [
    'Point2D',
    'Resolution',
    'Color',
]
