"""Command pattern implementation for the modal key tables."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
import logging

from .keyboard import KeyType
from .modes import Mode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


def _is_text(key_event: 'KeyEvent') -> bool:
    return len(key_event.value) == 1 and key_event.value.isprintable()


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the buffer
        """


class MovementCommand(EditorCommand):
    """Base class for focus movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._move(editor, key_event)
        editor.view.focus_to_cursor(editor.model.focus)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""


class UpCommand(MovementCommand):
    """Move focus one line up."""

    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        editor.model.move_up()


class DownCommand(MovementCommand):
    """Move focus one line down."""

    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        editor.model.move_down()


class LeftCommand(MovementCommand):
    """Move focus one column left, stopping at the line start."""

    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        editor.model.move_left()


class RightCommand(MovementCommand):
    """Move focus one column right, stopping past the last character."""

    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        editor.model.move_right()


class EditCommand(EditorCommand):
    """Base class for buffer editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        structural = self._edit(editor, key_event)
        if structural:
            # Line count changed; every visible row may be stale
            editor.view.invalidate()
        editor.view.focus_to_cursor(editor.model.focus)
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Perform the edit; return True if lines were added or removed."""


class InsertTextCommand(EditCommand):
    """Insert a typed character at the focus."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        # Control characters and multi-character tokens are not text
        if not _is_text(key_event):
            return False
        return super().execute(editor, key_event)

    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return editor.model.insert_char(key_event.value)


class InsertNewlineCommand(EditCommand):
    """Split the focus line at the focus column."""

    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return editor.model.insert_newline()


class BackspaceCommand(EditCommand):
    """Delete before the focus, joining with the previous line at column 0."""

    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return editor.model.backspace()


class ModeSwitchCommand(EditorCommand):
    """Switch to another mode."""

    def __init__(self, mode: Mode):
        self.mode = mode

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.set_mode(self.mode)
        return False


class CommandLineAppendCommand(EditorCommand):
    """Append a typed character to the pending command text."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        if _is_text(key_event):
            editor.command_line += key_event.value
        return False


class CommandLineBackspaceCommand(EditorCommand):
    """Drop the last character of the pending command text."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.command_line = editor.command_line[:-1]
        return False


class CommandLineCancelCommand(EditorCommand):
    """Abandon the pending command and return to base mode."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.set_mode(Mode.BASE)
        return False


class CommandLineExecuteCommand(EditorCommand):
    """Run the pending command text."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.run_command_line()
        return False


class CommandRegistry:
    """Registry for mapping key combinations to commands in one mode."""

    def __init__(self, regular_command: Optional[EditorCommand] = None):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        # Used for REGULAR keys that have no explicit binding
        self.regular_command = regular_command

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        command = self._commands.get((key_type, value))
        if command is None and key_type == KeyType.REGULAR:
            return self.regular_command
        return command

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Unbound keys are ignored.

        Returns:
            True if the buffer was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        return command.execute(editor, key_event)


def _register_arrows(registry: CommandRegistry):
    registry.register((KeyType.SPECIAL, 'up'), UpCommand())
    registry.register((KeyType.SPECIAL, 'down'), DownCommand())
    registry.register((KeyType.SPECIAL, 'left'), LeftCommand())
    registry.register((KeyType.SPECIAL, 'right'), RightCommand())


def base_mode_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register((KeyType.REGULAR, 'i'), ModeSwitchCommand(Mode.INSERT))
    registry.register((KeyType.REGULAR, ':'), ModeSwitchCommand(Mode.COMMAND))
    _register_arrows(registry)
    return registry


def insert_mode_registry() -> CommandRegistry:
    registry = CommandRegistry(regular_command=InsertTextCommand())
    registry.register((KeyType.SPECIAL, 'escape'), ModeSwitchCommand(Mode.BASE))
    _register_arrows(registry)
    registry.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
    registry.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
    registry.register((KeyType.SPECIAL, 'delete'), BackspaceCommand())
    return registry


def command_mode_registry() -> CommandRegistry:
    registry = CommandRegistry(regular_command=CommandLineAppendCommand())
    registry.register((KeyType.SPECIAL, 'escape'), CommandLineCancelCommand())
    registry.register((KeyType.SPECIAL, 'enter'), CommandLineExecuteCommand())
    registry.register((KeyType.SPECIAL, 'backspace'), CommandLineBackspaceCommand())
    registry.register((KeyType.SPECIAL, 'delete'), CommandLineBackspaceCommand())
    return registry


class ModeController:
    """Holds the active mode and routes key events to its key table."""

    def __init__(self):
        self.mode = Mode.BASE
        self._registries: Dict[Mode, CommandRegistry] = {
            Mode.BASE: base_mode_registry(),
            Mode.INSERT: insert_mode_registry(),
            Mode.COMMAND: command_mode_registry(),
        }

    def registry(self, mode: Mode) -> CommandRegistry:
        return self._registries[mode]

    def dispatch(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Run the active mode's command for ``key_event``.

        Returns:
            True if the buffer was modified
        """
        logger.debug(f"{self.mode.value}: {key_event.key_type.value} {key_event.value!r}")
        return self._registries[self.mode].execute(editor, key_event)
