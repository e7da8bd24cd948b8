"""naivedit CLI entry point.

Allows running via `python -m naivedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string

logger = logging.getLogger(__name__)


def _escape(s: str) -> str:
    """Return a printable representation of a raw key token."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print decoded key events until ESC is pressed."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler

    print("Keyboard test mode: press keys to see decoded events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while True:
            ev = kb.get_key_event()
            if not ev:
                continue
            if ev.value == 'escape':
                break
            print(f"type={ev.key_type.value} value={ev.value!r} raw='{_escape(ev.raw)}'")
    finally:
        term.cleanup()
    print("Exiting keyboard test.")


def main(argv: Optional[list[str]] = None) -> int:
    # One optional positional file name plus a couple of flags
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return 0

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .errors import NaiveditError
    from .settings import Settings, configure_logging

    settings = Settings.load()
    configure_logging(settings)
    filename = args[0] if args else None
    logger.info(f"Starting with file {filename!r}")
    try:
        Editor(filename, settings=settings).run()
    except NaiveditError as e:
        logger.error(str(e))
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
