"""Shared test fixtures: a fake terminal that records what is written."""

import re

import pytest


class FakeTerm:
    """Stand-in for blessed.Terminal producing readable markers."""

    home = '[HOME]'
    clear = '[CLEAR]'
    clear_eol = '[EOL]'
    enter_fullscreen = '[FULLSCREEN]'
    exit_fullscreen = '[EXIT_FULLSCREEN]'
    normal_cursor = '[NORMAL_CURSOR]'

    def __init__(self, width=80, height=24):
        self.width = width
        self.height = height

    def move_yx(self, y, x):
        return f'[MOVE:{y},{x}]'


class FakeTerminal:
    """Stand-in for TerminalInterface; keeps every write."""

    def __init__(self, width=80, height=24):
        self.term = FakeTerm(width, height)
        self.writes = []
        self.setup_calls = 0
        self.cleanup_calls = 0

    @property
    def width(self):
        return self.term.width

    @property
    def height(self):
        return self.term.height

    def setup(self):
        self.setup_calls += 1

    def cleanup(self):
        self.cleanup_calls += 1

    def write(self, text):
        self.writes.append(text)

    def get_key(self):
        return None

    @property
    def last_write(self):
        return self.writes[-1]


_ROW_RE = re.compile(r'\[MOVE:(\d+),0\]\[EOL\]((?:(?!\[MOVE:).)*)')


def drawn_rows(output):
    """Map 1-based screen row -> text for every row drawn in ``output``."""
    return {int(y) + 1: text for y, text in _ROW_RE.findall(output)}


def final_cursor(output):
    """1-based (x, y) of the cursor move ending ``output``, or None."""
    match = re.search(r'\[MOVE:(\d+),(\d+)\]$', output)
    if match is None:
        return None
    y, x = match.groups()
    return (int(x) + 1, int(y) + 1)


@pytest.fixture
def fake_terminal():
    return FakeTerminal()


@pytest.fixture
def small_terminal():
    """A 4 column by 5 row terminal: status line plus four text rows."""
    return FakeTerminal(width=4, height=5)
