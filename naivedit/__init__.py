"""naivedit - a minimal modal line editor for the terminal."""

from .model import TextModel, TextBuffer, Focus
from .modes import Mode
from .view import Viewport, line_window

__all__ = [
    'TextModel',
    'TextBuffer',
    'Focus',
    'Mode',
    'Viewport',
    'line_window',
]
