"""
Shared primitive data types for Breakout.

Basic geometric and color types used by the layout, the input adapter
and the skins.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point for pointer positions and coordinates.

    Attributes:
        x: Horizontal position in surface pixels
        y: Vertical position in surface pixels

    Examples:
        >>> pointer = Point2D(x=400.0, y=300.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


class Resolution(BaseModel):
    """Drawing surface or viewport size.

    Dimensions are floats because compact surfaces are a fraction of
    the viewport width. Zero or negative dimensions are rejected at
    construction so a bad surface never reaches the physics loop.

    Attributes:
        width: Horizontal size in pixels, greater than zero
        height: Vertical size in pixels, greater than zero

    Examples:
        >>> surface = Resolution(width=800, height=600)
        >>> surface.aspect_ratio
        1.3333333333333333
    """
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Resolution({self.width:g}x{self.height:g})"


class Color(BaseModel):
    """Immutable RGB color with validation.

    Each component is a byte, 0 to 255.

    Examples:
        >>> Color(r=0, g=149, b=221).as_rgb_tuple
        (0, 149, 221)
    """
    r: int
    g: int
    b: int

    @field_validator('r', 'g', 'b')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Reject components outside one byte."""
        if not 0 <= v <= 255:
            raise ValueError(f"RGB component {v} is outside 0..255")
        return v

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple for pygame drawing calls."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b})"
