"""Viewport: maps the buffer and focus onto a fixed character grid."""

import logging
from typing import Optional

from .constants import EditorConstants
from .model import Focus, TextBuffer
from .modes import Mode

logger = logging.getLogger(__name__)


def cursor_for_focus(focus: Focus, width: int, height: int) -> tuple[int, int]:
    """Return the 1-based (x, y) screen cursor for a focus.

    Row 1 is the status line. Once the focus row passes the last text row
    the cursor pins to the bottom row, and likewise to the rightmost
    column; past that point the content scrolls instead.
    """
    x = min(focus.column + 1, width)
    y = min(focus.row + EditorConstants.FIRST_TEXT_ROW, height)
    return (x, y)


def visible_rows(focus: Focus, buffer_length: int, height: int) -> range:
    """Buffer rows shown in the text region, top to bottom."""
    if min(focus.row + EditorConstants.FIRST_TEXT_ROW, height) != height:
        return range(0, min(buffer_length, height - 1))
    # Scrolled: focus row is the last visible text row
    return range(focus.row + EditorConstants.FIRST_TEXT_ROW - height, focus.row + 1)


def horizontal_start(column: int, width: int) -> int:
    """First line column shown on screen for a focus column."""
    if min(column + 1, width) != width:
        return 0
    return column + 1 - width


def line_window(line: str, column: int, width: int) -> str:
    """The part of ``line`` visible when the focus is at ``column``.

    Left-anchored until the focus column reaches the right edge, then a
    trailing window ending at the focus column. A line too short to reach
    that window shows as empty.
    """
    start = horizontal_start(column, width)
    if start == 0:
        return line[:width]
    if len(line) <= start:
        return ""
    return line[start:min(column + 1, len(line))]


class Viewport:
    """Renders the editor state into the terminal.

    The screen cursor is derived from the focus on every call and never
    stored as independent state. The only memory kept between renders is
    the scroll window of the previous frame, used to decide whether
    patching the focus row is enough or every text row must be redrawn.
    """

    width: int
    height: int
    cursor_x: int = 1
    cursor_y: int = EditorConstants.FIRST_TEXT_ROW

    def __init__(self, terminal, size: tuple[int, int]):
        self.terminal = terminal
        self.width, self.height = size
        self._full_update = True
        self._last_window: Optional[tuple[int, int]] = None

    @property
    def text_rows(self) -> int:
        """Number of screen rows available for buffer text."""
        return self.height - 1

    @property
    def screen_cursor(self) -> tuple[int, int]:
        return (self.cursor_x, self.cursor_y)

    def focus_to_cursor(self, focus: Focus) -> tuple[int, int]:
        """Recompute the screen cursor from the focus."""
        self.cursor_x, self.cursor_y = cursor_for_focus(focus, self.width, self.height)
        return self.screen_cursor

    def invalidate(self) -> None:
        """Force the next render to redraw every text row."""
        self._full_update = True

    def clear(self) -> None:
        """Clear the whole screen."""
        term = self.terminal.term
        self.terminal.write(term.home + term.clear)
        self.invalidate()

    def status_text(self, mode: Mode, command_line: str = "", status_message: Optional[str] = None) -> str:
        if mode is Mode.COMMAND:
            text = mode.label + command_line
        elif status_message:
            text = mode.label + EditorConstants.STATUS_MESSAGE_SEPARATOR + status_message
        else:
            text = mode.label
        return text[:self.width]

    def _draw_row(self, screen_row: int, text: str) -> str:
        term = self.terminal.term
        return term.move_yx(screen_row - 1, 0) + term.clear_eol + text

    def render(self, mode: Mode, focus: Focus, buffer: TextBuffer,
               command_line: str = "", status_message: Optional[str] = None) -> None:
        """Draw one frame and write it to the terminal in a single flush."""
        term = self.terminal.term
        self.focus_to_cursor(focus)
        rows = visible_rows(focus, len(buffer), self.height)
        window = (rows.start, horizontal_start(focus.column, self.width))
        out = []

        if self._full_update or window != self._last_window:
            logger.debug("full redraw rows=%s window=%s", rows, window)
            for offset in range(self.text_rows):
                row = rows.start + offset
                text = line_window(buffer[row], focus.column, self.width) if row in rows else ""
                out.append(self._draw_row(EditorConstants.FIRST_TEXT_ROW + offset, text))
            self._full_update = False
            self._last_window = window
        else:
            out.append(self._draw_row(self.cursor_y, line_window(buffer[focus.row], focus.column, self.width)))

        out.append(self._draw_row(EditorConstants.STATUS_ROW, self.status_text(mode, command_line, status_message)))
        # In command mode the cursor stays after the typed command text
        if mode is not Mode.COMMAND:
            out.append(term.move_yx(self.cursor_y - 1, self.cursor_x - 1))

        self.terminal.write(''.join(out))
