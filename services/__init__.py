"""
Terminal-facing services for the snake game.
"""

from .renderer import Renderer, CursesRenderer

__all__ = [
    'Renderer',
    'CursesRenderer',
]
