"""Exception types raised by naivedit."""

from .constants import EditorConstants


class NaiveditError(Exception):
    """Base class for editor errors."""


class TerminalTooSmallError(NaiveditError):
    """The controlling terminal cannot hold a status line and a text row."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(
            EditorConstants.TERMINAL_TOO_SMALL_MESSAGE.format(
                EditorConstants.MIN_TERMINAL_WIDTH,
                EditorConstants.MIN_TERMINAL_HEIGHT,
                width,
                height,
            )
        )
