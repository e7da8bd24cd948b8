"""Constants and configuration for the naivedit editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Screen layout
    STATUS_ROW = 1  # Row reserved for the mode/status line (1-based)
    FIRST_TEXT_ROW = 2  # First screen row holding buffer text (1-based)

    # Terminal requirements
    MIN_TERMINAL_WIDTH = 1
    MIN_TERMINAL_HEIGHT = 2  # Status line plus at least one text row

    # Mode labels shown on the status line
    BASE_MODE_LABEL = "BASE MODE"
    INSERT_MODE_LABEL = "INSERT MODE"
    COMMAND_MODE_LABEL = "COMMAND MODE:"
    STATUS_MESSAGE_SEPARATOR = "  "

    # Command line mini-language
    COMMAND_SEPARATOR = " "
    QUIT_COMMAND = "q"
    WRITE_COMMAND = "w"

    # File operations
    LINE_TERMINATOR = "\n"
    FILE_ENCODING = "utf-8"
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Status messages
    NO_FILE_NAME_MESSAGE = "No file name"
    WRITTEN_MESSAGE = '"{}" written, {} lines'
    WRITE_ERROR_MESSAGE = "Error: cannot write {}: {}"
    TERMINAL_TOO_SMALL_MESSAGE = "Terminal too small! Need at least {}x{}, got {}x{}."

    # Settings and logging
    APP_NAME = "naivedit"
    SETTINGS_FILENAME = "settings.json"
    LOG_FILENAME = "naivedit.log"
    LOG_LEVEL_ENV_VAR = "NAIVEDIT_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
