"""Command line interpreter for ``:`` commands."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from .constants import EditorConstants
from .fileio import write_lines

logger = logging.getLogger(__name__)


class CommandAction(Enum):
    """What the event loop should do after a command ran."""
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass
class CommandResult:
    action: CommandAction = CommandAction.CONTINUE
    message: Optional[str] = None

    @property
    def should_quit(self) -> bool:
        return self.action is CommandAction.QUIT


class CommandInterpreter:
    """Parses and runs ``w [file]`` and ``q``.

    Unknown or empty commands do nothing. ``q`` never exits by itself; it
    returns a QUIT result for the event loop to act on.
    """

    def __init__(self, writer: Callable[[str, Iterable[str]], int] = write_lines):
        self.writer = writer

    def execute(self, text: str, lines: Iterable[str], filename: Optional[str] = None) -> CommandResult:
        """Run one command.

        Args:
            text: Command text typed after ':'
            lines: Buffer lines to write for ``w``
            filename: Name the editor was opened with, if any
        """
        tokens = text.split(EditorConstants.COMMAND_SEPARATOR)
        name = tokens[0]
        args = tokens[1:]

        if name == EditorConstants.QUIT_COMMAND:
            logger.info("Quit requested")
            return CommandResult(action=CommandAction.QUIT)
        if name == EditorConstants.WRITE_COMMAND:
            target = args[0] if args and args[0] else filename
            return self._write(target, lines)

        logger.debug(f"Ignoring unknown command {text!r}")
        return CommandResult()

    def _write(self, target: Optional[str], lines: Iterable[str]) -> CommandResult:
        if not target:
            return CommandResult(message=EditorConstants.NO_FILE_NAME_MESSAGE)
        try:
            count = self.writer(target, lines)
        except OSError as e:
            logger.error(f"Write to {target} failed: {e}")
            reason = e.strerror or str(e)
            return CommandResult(message=EditorConstants.WRITE_ERROR_MESSAGE.format(target, reason))
        logger.info(f"Wrote {count} lines to {target}")
        return CommandResult(message=EditorConstants.WRITTEN_MESSAGE.format(target, count))
