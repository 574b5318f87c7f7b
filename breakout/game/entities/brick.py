"""Brick entity and the brick grid.

A brick only ever changes from visible to hidden. Bringing bricks back
means building a fresh grid, which is what setup, resize, level-up and
reset all do.
"""

from dataclasses import dataclass, replace
from typing import Iterator, List, Tuple


class EmptyGridError(ValueError):
    """Raised when a brick grid would contain no bricks."""


@dataclass(frozen=True)
class Brick:
    """A single destructible brick.

    Attributes:
        x: Left edge X position
        y: Top edge Y position
        width: Brick width
        height: Brick height
        color: Color identifier for the skin
        grid_position: (row, col) position in grid
        visible: False once the brick has been hit
    """

    x: float
    y: float
    width: float
    height: float
    color: str = "blue"
    grid_position: Tuple[int, int] = (0, 0)
    visible: bool = True

    @property
    def center_x(self) -> float:
        """Get center X position."""
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        """Get center Y position."""
        return self.y + self.height / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def hit(self) -> 'Brick':
        """Return the hidden version of this brick."""
        return replace(self, visible=False)


class BrickGrid:
    """Rows x columns of bricks, iterated in row-major order."""

    def __init__(self, bricks: List[List[Brick]]):
        """Initialize grid from a row-major nested list.

        Args:
            bricks: bricks[row][col]

        Raises:
            EmptyGridError: If there are no rows or no columns
        """
        if not bricks or not bricks[0]:
            raise EmptyGridError("Brick grid must have at least one row and one column")
        self._bricks = bricks

    @classmethod
    def build(
        cls,
        rows: int,
        columns: int,
        brick_width: float,
        brick_height: float,
        padding: float,
        offset_x: float,
        offset_y: float,
        color: str = "blue",
    ) -> 'BrickGrid':
        """Create a grid of visible bricks.

        Args:
            rows: Number of rows (top to bottom)
            columns: Number of columns (left to right)
            brick_width: Width of each brick
            brick_height: Height of each brick
            padding: Gap between neighbouring bricks
            offset_x: X of the first column
            offset_y: Y of the first row
            color: Color identifier shared by every brick

        Returns:
            New BrickGrid

        Raises:
            EmptyGridError: If rows or columns is less than 1
        """
        if rows < 1 or columns < 1:
            raise EmptyGridError(f"Brick grid needs rows and columns >= 1, got {rows}x{columns}")

        bricks = [
            [
                Brick(
                    x=offset_x + col * (brick_width + padding),
                    y=offset_y + row * (brick_height + padding),
                    width=brick_width,
                    height=brick_height,
                    color=color,
                    grid_position=(row, col),
                )
                for col in range(columns)
            ]
            for row in range(rows)
        ]
        return cls(bricks)

    @property
    def rows(self) -> int:
        """Get number of rows."""
        return len(self._bricks)

    @property
    def columns(self) -> int:
        """Get number of columns."""
        return len(self._bricks[0])

    def __len__(self) -> int:
        return self.rows * self.columns

    def __iter__(self) -> Iterator[Brick]:
        for row in self._bricks:
            yield from row

    def __getitem__(self, position: Tuple[int, int]) -> Brick:
        row, col = position
        return self._bricks[row][col]

    @property
    def visible_count(self) -> int:
        """Get number of bricks still standing."""
        return sum(1 for brick in self if brick.visible)

    @property
    def all_cleared(self) -> bool:
        """Check if every brick has been hit."""
        return self.visible_count == 0

    def hit(self, row: int, col: int) -> bool:
        """Hide the brick at (row, col).

        Returns:
            True if the brick was visible and is now hidden, False if it
            had already been hit
        """
        brick = self._bricks[row][col]
        if not brick.visible:
            return False
        self._bricks[row][col] = brick.hit()
        return True
