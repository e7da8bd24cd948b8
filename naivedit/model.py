from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class Focus:
    """Logical edit position: 0-based column and row into the buffer."""
    column: int = 0
    row: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.column, self.row)


class TextBuffer:
    """Ordered, never-empty list of text lines.

    Lines are plain strings, so a line's length is always ``len(line)``.
    """

    def __init__(self, lines: Optional[list[str]] = None):
        self._lines: list[str] = list(lines) if lines else [""]

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, row: int) -> str:
        self._check_row(row)
        return self._lines[row]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __eq__(self, other):
        if isinstance(other, TextBuffer):
            return self._lines == other._lines
        if isinstance(other, list):
            return self._lines == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TextBuffer({self._lines!r})"

    @property
    def lines(self) -> list[str]:
        """Copy of the current lines."""
        return list(self._lines)

    def line_length(self, row: int) -> int:
        return len(self[row])

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._lines):
            raise IndexError(f"row {row} out of range for buffer of {len(self._lines)} lines")

    def _check_column(self, row: int, column: int) -> None:
        if not 0 <= column <= len(self[row]):
            raise IndexError(f"column {column} out of range for line {row} of length {len(self[row])}")

    def insert_char(self, row: int, column: int, char: str) -> None:
        self._check_column(row, column)
        line = self._lines[row]
        self._lines[row] = line[:column] + char + line[column:]

    def delete_char(self, row: int, column: int) -> None:
        """Remove the character at ``column`` of ``row``."""
        self._check_row(row)
        line = self._lines[row]
        if not 0 <= column < len(line):
            raise IndexError(f"no character at column {column} of line {row}")
        self._lines[row] = line[:column] + line[column + 1:]

    def split_line(self, row: int, column: int) -> None:
        """Split ``row`` at ``column``; the tail becomes a new line below."""
        self._check_column(row, column)
        line = self._lines[row]
        self._lines[row] = line[:column]
        self._lines.insert(row + 1, line[column:])

    def join_with_previous(self, row: int) -> int:
        """Append ``row`` to the line above and remove it.

        Returns the junction column in the merged line.
        """
        self._check_row(row)
        if row == 0:
            raise IndexError("first line has no previous line to join")
        junction = len(self._lines[row - 1])
        self._lines[row - 1] += self._lines.pop(row)
        return junction


class TextModel:
    """A text buffer together with its focus.

    Movement and editing methods keep the focus valid against the current
    buffer. Editing methods return True when the line structure changed
    (a line was added or removed), which means the whole view is stale.
    """

    buffer: TextBuffer
    focus: Focus

    def __init__(self, lines: Optional[list[str]] = None):
        self.buffer = TextBuffer(lines)
        self.focus = Focus()

    @property
    def current_line(self) -> str:
        return self.buffer[self.focus.row]

    # --- Focus movement ---

    def move_up(self):
        if self.focus.row > 0:
            self.focus.row -= 1
            self._clamp_column()

    def move_down(self):
        if self.focus.row < len(self.buffer) - 1:
            self.focus.row += 1
            self._clamp_column()

    def move_left(self):
        if self.focus.column > 0:
            self.focus.column -= 1

    def move_right(self):
        # No wrap onto the next line at end of line
        if self.focus.column < len(self.current_line):
            self.focus.column += 1

    def goto(self, column: int, row: int):
        assert 0 <= row < len(self.buffer) and 0 <= column <= len(self.buffer[row]), \
            f"focus ({column}, {row}) outside buffer"
        self.focus.column = column
        self.focus.row = row

    def _clamp_column(self):
        length = len(self.current_line)
        if self.focus.column > length:
            self.focus.column = length

    # --- Editing ---

    def insert_char(self, char: str) -> bool:
        self.buffer.insert_char(self.focus.row, self.focus.column, char)
        self.move_right()
        return False

    def insert_newline(self) -> bool:
        self.buffer.split_line(self.focus.row, self.focus.column)
        self.goto(0, self.focus.row + 1)
        return True

    def backspace(self) -> bool:
        if self.focus.column > 0:
            self.buffer.delete_char(self.focus.row, self.focus.column - 1)
            self.move_left()
            return False
        if self.focus.row > 0:
            junction = self.buffer.join_with_previous(self.focus.row)
            self.goto(junction, self.focus.row - 1)
            return True
        # Start of the first line: nothing to merge into
        return False
