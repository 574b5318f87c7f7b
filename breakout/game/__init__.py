"""Breakout game core: entities, physics, layout and progression."""
