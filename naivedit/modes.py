"""Editor modes."""

from enum import Enum

from .constants import EditorConstants


class Mode(Enum):
    """The three mutually exclusive editor modes."""
    BASE = "base"  # Navigation only
    INSERT = "insert"  # Text mutation and navigation
    COMMAND = "command"  # Command line entry

    @property
    def label(self) -> str:
        """Status line label for this mode."""
        if self is Mode.INSERT:
            return EditorConstants.INSERT_MODE_LABEL
        if self is Mode.COMMAND:
            return EditorConstants.COMMAND_MODE_LABEL
        return EditorConstants.BASE_MODE_LABEL
