"""Test keyboard input handling."""

import pytest
from unittest.mock import Mock
from naivedit.keyboard import KeyboardHandler, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


@pytest.fixture
def handler():
    return KeyboardHandler(MockTerminal())


@pytest.mark.parametrize("token,value", [
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<LEFT>', 'left'),
    ('<RIGHT>', 'right'),
    ('<ESC>', 'escape'),
    ('\x1b', 'escape'),
    ('<Ctrl-j>', 'enter'),
    ('<Ctrl-m>', 'enter'),
    ('\n', 'enter'),
    ('\r', 'enter'),
    ('<BACKSPACE>', 'backspace'),
    ('\x7f', 'backspace'),
    ('<Ctrl-h>', 'backspace'),
    ('<DELETE>', 'delete'),
])
def test_special_keys(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value


def test_regular_characters(handler):
    for ch in ('a', 'i', ':', 'Z', '~', 'é'):
        event = handler.parse_key(ch)
        assert event.key_type == KeyType.REGULAR
        assert event.value == ch


def test_space_token_is_regular_space(handler):
    event = handler.parse_key('<SPACE>')
    assert event.key_type == KeyType.REGULAR
    assert event.value == ' '


def test_angle_brackets_are_regular(handler):
    """A lone '<' or '>' is text, not a key name."""
    assert handler.parse_key('<').key_type == KeyType.REGULAR
    assert handler.parse_key('>').key_type == KeyType.REGULAR


def test_control_letters(handler):
    event = handler.parse_key('<Ctrl-x>')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'x'
    assert event.is_ctrl

    event = handler.parse_key('\x11')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'q'


def test_tab_is_control_i(handler):
    event = handler.parse_key('<TAB>')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'i'


def test_modified_keys_stay_unbound_specials(handler):
    """Alt and shifted keys must not turn into text or a bound key."""
    for token, value in (('<Esc+f>', 'esc-f'), ('<Meta-LEFT>', 'meta-left'),
                         ('<Ctrl-LEFT>', 'ctrl-left'), ('<PAGEUP>', 'pageup')):
        event = handler.parse_key(token)
        assert event.key_type == KeyType.SPECIAL
        assert event.value == value


def test_get_key_event_reads_from_terminal():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key('<UP>')
    terminal.add_key('x')

    first = handler.get_key_event()
    assert first.value == 'up'
    assert first.raw == '<UP>'
    assert handler.get_key_event().value == 'x'
    assert handler.get_key_event() is None


def test_empty_token_gives_no_event():
    terminal = Mock()
    terminal.get_key.return_value = ''
    handler = KeyboardHandler(terminal)
    assert handler.get_key_event() is None
    terminal.get_key.assert_called_once_with()
