"""Plain-text file loading and saving."""

import logging
import os
import stat
import tempfile
from typing import Iterable, Optional

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def read_lines(filename: str) -> Optional[list[str]]:
    """Read a file as a list of lines without their terminators.

    Returns None when the file cannot be read (missing, unreadable or not
    valid text); the caller starts from an empty buffer in that case.
    """
    try:
        with open(filename, 'r', encoding=EditorConstants.FILE_ENCODING, newline='') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {filename}: {e}")
        return None

    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()
    lines = [line[:-1] if line.endswith('\r') else line for line in lines]
    logger.info(f"Read {len(lines)} lines from {filename}")
    return lines or [""]


def _new_file_mode() -> int:
    """Permission bits a plain open() would give a new file under the umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_lines(filename: str, lines: Iterable[str], atomic: bool = True) -> int:
    """Write each line followed by a line terminator.

    Creates the file if absent and replaces its content otherwise. With
    ``atomic`` the data goes to a temporary file next to the real target
    (symlinks resolved) that is then renamed over it, keeping the target's
    permission bits. Raises OSError on failure.

    Returns:
        Number of lines written
    """
    lines = list(lines)
    content = ''.join(line + EditorConstants.LINE_TERMINATOR for line in lines)

    if not atomic:
        with open(filename, 'w', encoding=EditorConstants.FILE_ENCODING, newline='') as f:
            f.write(content)
        return len(lines)

    # Rename over the file a symlink points to, never over the link itself
    target = os.path.realpath(filename)
    try:
        mode = stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        mode = _new_file_mode()

    # Same directory so the rename stays on one filesystem
    dir_name = os.path.dirname(target) or '.'
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                         dir=dir_name, suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                         newline='', delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.chmod(temp_filename, mode)
        os.replace(temp_filename, target)
    except OSError:
        if temp_filename and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {temp_filename}: {cleanup_error}")
        raise
    return len(lines)
