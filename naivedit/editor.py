"""Main editor controller."""

import logging
from functools import partial
from typing import Optional

from .commands import ModeController
from .constants import EditorConstants
from .errors import TerminalTooSmallError
from .fileio import read_lines, write_lines
from .interpreter import CommandInterpreter
from .keyboard import KeyboardHandler, KeyEvent
from .model import TextModel
from .modes import Mode
from .settings import Settings
from .terminal import TerminalInterface
from .view import Viewport

logger = logging.getLogger(__name__)


class Editor:
    """Composition root: owns the buffer, focus, view and mode state.

    Every key event is fully applied and then rendered exactly once before
    the next one is read.
    """

    def __init__(self, filename: Optional[str] = None,
                 terminal: Optional[TerminalInterface] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        # Terminal size is captured once, at startup
        self.view = Viewport(self.terminal, (self.terminal.width, self.terminal.height))
        self.controller = ModeController()
        self.interpreter = CommandInterpreter(
            writer=partial(write_lines, atomic=self.settings.atomic_save))
        self.filename = filename
        self.model = TextModel(read_lines(filename) if filename else None)
        self.command_line = ""
        self.status_message: Optional[str] = None
        self.running = False

    @property
    def mode(self) -> Mode:
        return self.controller.mode

    def set_mode(self, mode: Mode):
        """Switch mode; leaving command mode drops the pending command text."""
        if self.controller.mode is Mode.COMMAND and mode is not Mode.COMMAND:
            self.command_line = ""
        logger.debug(f"Mode {self.controller.mode.value} -> {mode.value}")
        self.controller.mode = mode

    def run_command_line(self):
        """Execute the pending command text and return to base mode."""
        result = self.interpreter.execute(self.command_line, self.model.buffer.lines, self.filename)
        self.set_mode(Mode.BASE)
        self.status_message = result.message
        if result.should_quit:
            self.running = False

    def handle_key_event(self, key_event: KeyEvent):
        """Apply one key event to the editor state."""
        # A status message lasts until the next key press
        self.status_message = None
        self.controller.dispatch(self, key_event)

    def render(self):
        self.view.render(self.mode, self.model.focus, self.model.buffer,
                         self.command_line, self.status_message)

    def _check_terminal_size(self):
        if (self.view.width < EditorConstants.MIN_TERMINAL_WIDTH
                or self.view.height < EditorConstants.MIN_TERMINAL_HEIGHT):
            raise TerminalTooSmallError(self.view.width, self.view.height)

    def run(self):
        """Run the main editor loop until quit."""
        self._check_terminal_size()
        self.terminal.setup()
        self.running = True
        try:
            self.view.clear()
            self.render()
            while self.running:
                key_event = self.keyboard.get_key_event()
                if key_event is None:
                    continue
                self.handle_key_event(key_event)
                if self.running:
                    self.render()
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            # Single exit point: leave a clean screen behind
            self.running = False
            self.view.clear()
            self.terminal.cleanup()
