"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key token from curtsies
    is_ctrl: bool = False


def special(value: str, raw: Optional[str] = None) -> KeyEvent:
    """Build a SPECIAL key event (arrows, enter, escape, ...)."""
    return KeyEvent(key_type=KeyType.SPECIAL, value=value, raw=raw or value)


def regular(char: str) -> KeyEvent:
    """Build a REGULAR key event for a typed character."""
    return KeyEvent(key_type=KeyType.REGULAR, value=char, raw=char)


def ctrl(char: str, raw: str) -> KeyEvent:
    return KeyEvent(key_type=KeyType.CTRL, value=char, raw=raw, is_ctrl=True)


class KeyboardHandler:
    """Turns curtsies key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Get next key event, or None if no key arrived."""
        key = self.terminal.get_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: key token such as 'a', '<UP>', '<Ctrl-j>' or '<ESC>'

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies key names like '<LEFT>', '<Ctrl-x>', '<SPACE>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str in ('\n', '\r'):
                return special('enter', key_str)
            if key_str == '\x1b':
                return special('escape', key_str)
            if key_str in ('\x7f', '\x08'):
                return special('backspace', key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                return ctrl(chr(ord('a') + o - 1), key_str)

        return regular(key_str)

    def _parse_named(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1].lower().replace('+', '-')
        parts = name.split('-')
        base = parts[-1]
        mods = set(parts[:-1])

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return regular(' ')
            if base == 'tab':
                return ctrl('i', key_str)
            if base in ('esc', 'escape'):
                return special('escape', key_str)
            return special(base, key_str)

        if mods == {'ctrl'} and len(base) == 1:
            # Ctrl-J / Ctrl-M are what Enter sends
            if base in ('j', 'm'):
                return special('enter', key_str)
            if base == 'h':
                return special('backspace', key_str)
            return ctrl(base, key_str)
        # Alt, shift and other modified keys are not bound in any mode
        return special(name, key_str)
