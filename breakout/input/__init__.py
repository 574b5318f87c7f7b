"""
Input abstraction layer for Breakout.

Keyboard, mouse and touch all arrive as InputEvents so the game never
touches pygame events directly.
"""

from breakout.input.input_event import InputEvent, InputEventType, LEFT, RIGHT

__all__ = ['InputEvent', 'InputEventType', 'LEFT', 'RIGHT']
