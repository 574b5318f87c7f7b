"""
Breakout - paddle, ball and brick grid arcade game on pygame.

Provides:
- game_mode: BreakoutMode, the playable game
- game: entities, physics, layout, level table and progression
- input: keyboard/pointer input events
- models: Pydantic primitives (Point2D, Resolution, Color)
- logging: per-module logger
"""

__version__ = "1.0.0"
