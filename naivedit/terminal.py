"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional


class TerminalInterface:
    """Owns the controlling terminal: output sequences, size and raw input."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and put the keyboard in raw mode."""
        self.write(self.term.enter_fullscreen + self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input  # type: ignore
            self._curtsies_input = Input(keynames='curtsies')  # type: ignore
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Leave raw mode and fullscreen, restoring the terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            self.write(self.term.exit_fullscreen + self.term.normal_cursor)
            self.is_fullscreen = False

    def write(self, text: str):
        """Write a batch of output and flush it in one go."""
        print(text, end='', flush=True)

    def get_key(self):
        """Block until the next keypress and return its curtsies token.

        Returns None before setup() has put the keyboard in raw mode.
        """
        if self._curtsies_input is None:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows, status line included."""
        return self.term.height
