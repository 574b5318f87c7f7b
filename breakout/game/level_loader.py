"""
Level table loader - YAML level definitions with Pydantic validation.

A level table lists the levels in play order. Each level says how big
the brick grid is, how wide the paddle is and what color the bricks
are. The last entry is the max level; clearing it is a victory.

Example level table (default.yaml):
    name: Classic
    min_paddle_width: 40
    levels:
      - name: Level 1
        rows: 5
        columns: 9
        paddle_width: 80
        color: blue
      - name: Level 2
        rows: 6
        columns: 9
        paddle_width: 70
        color: green
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from breakout.config import PADDLE_DEFAULT_WIDTH, PADDLE_MIN_WIDTH

LEVELS_DIR = Path(__file__).parent.parent / 'levels'


class LevelLoadError(ValueError):
    """Raised when a level table cannot be parsed or validated."""


class LevelSpec(BaseModel):
    """One level of the table, in reference-resolution units."""
    model_config = {"frozen": True}

    name: str = Field(default="Level", description="Display name")
    rows: int = Field(description="Brick rows, top to bottom", ge=1)
    columns: int = Field(description="Brick columns, left to right", ge=1)
    paddle_width: float = Field(
        default=PADDLE_DEFAULT_WIDTH,
        description="Paddle width before scaling",
        gt=0.0,
    )
    color: str = Field(default="blue", description="Brick color identifier")


class LevelTable(BaseModel):
    """Ordered levels plus the rules shared by all of them."""
    model_config = {"frozen": True}

    name: str = Field(default="Untitled")
    min_paddle_width: float = Field(
        default=PADDLE_MIN_WIDTH,
        description="Paddle never shrinks below this width",
        gt=0.0,
    )
    levels: List[LevelSpec] = Field(min_length=1)

    @property
    def max_level(self) -> int:
        """Get the highest level number."""
        return len(self.levels)

    def get_level(self, level: int) -> LevelSpec:
        """Get a level by its 1-based number.

        Raises:
            IndexError: If level is outside 1..max_level
        """
        if not 1 <= level <= self.max_level:
            raise IndexError(f"Level {level} out of range 1..{self.max_level}")
        return self.levels[level - 1]

    def paddle_width_for(self, level: int) -> float:
        """Get the unscaled paddle width for a level, floored at the minimum."""
        return max(self.get_level(level).paddle_width, self.min_paddle_width)


class LevelLoader:
    """Loads and validates level tables from YAML files.

    Attributes:
        levels_dir: Directory containing <name>.yaml level tables
    """

    def __init__(self, levels_dir: Optional[Path] = None):
        """Initialize the loader.

        Args:
            levels_dir: Optional custom directory. Defaults to the
                        tables shipped with the package.
        """
        self.levels_dir = Path(levels_dir) if levels_dir is not None else LEVELS_DIR

    def load(self, table_id: str = 'default') -> LevelTable:
        """Load a level table by ID (file name without .yaml).

        Raises:
            FileNotFoundError: If the table file doesn't exist
            LevelLoadError: If the YAML is malformed or fails validation
        """
        return self.load_file(self.levels_dir / f"{table_id}.yaml")

    def load_file(self, path: Path) -> LevelTable:
        """Load and validate a level table from an explicit path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            LevelLoadError: If the YAML is malformed or fails validation
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Level table not found: {path}")

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise LevelLoadError(f"Failed to parse YAML file '{path}': {e}") from e

        if not isinstance(data, dict):
            raise LevelLoadError(f"Level table '{path}' must be a mapping")

        try:
            return LevelTable(**data)
        except ValidationError as e:
            raise LevelLoadError(f"Invalid level table in '{path}':\n{e}") from e

    def list_available(self) -> List[str]:
        """List level table IDs in the levels directory, sorted."""
        if not self.levels_dir.exists():
            return []
        return sorted(f.stem for f in self.levels_dir.glob("*.yaml"))
