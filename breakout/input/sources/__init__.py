"""Breakout input sources."""

from breakout.input.sources.base import InputSource
from breakout.input.sources.keyboard_pointer import KeyboardPointerSource

__all__ = ['InputSource', 'KeyboardPointerSource']
