"""User settings and logging setup.

Settings live in a JSON file in the user's config directory. A missing or
broken file never stops the editor; the defaults are used instead.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Editor settings with their defaults."""
    log_enabled: bool = False
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL
    atomic_save: bool = True

    @staticmethod
    def default_path() -> Path:
        return Path(platformdirs.user_config_dir(EditorConstants.APP_NAME)) / EditorConstants.SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> "Settings":
        """Load settings from ``path`` (default: user config dir).

        ``NAIVEDIT_LOG_LEVEL`` in the environment overrides the configured
        level and turns logging on.
        """
        path = path or cls.default_path()
        environ = os.environ if environ is None else environ
        settings = cls()
        settings._apply(cls._read(path))

        env_level = environ.get(EditorConstants.LOG_LEVEL_ENV_VAR)
        if env_level:
            settings.log_level = env_level.upper()
            settings.log_enabled = True
        return settings

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def _apply(self, data: Dict[str, Any]) -> None:
        for key in ('log_enabled', 'atomic_save'):
            if key in data:
                if isinstance(data[key], bool):
                    setattr(self, key, data[key])
                else:
                    logger.warning(f"Setting {key} must be true or false, ignoring {data[key]!r}")
        if 'log_level' in data:
            value = data['log_level']
            if isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int):
                self.log_level = value.upper()
            else:
                logger.warning(f"Unknown log level {value!r}, ignoring")


def configure_logging(settings: Settings, log_dir: Optional[Path] = None) -> logging.Logger:
    """Route the package's log records to a file.

    The terminal belongs to the editor, so nothing is ever logged to
    stdout or stderr. With logging disabled the package logger gets a
    NullHandler.
    """
    package_logger = logging.getLogger(EditorConstants.APP_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = False

    if not settings.log_enabled:
        package_logger.addHandler(logging.NullHandler())
        return package_logger

    log_dir = log_dir or Path(platformdirs.user_log_dir(EditorConstants.APP_NAME))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / EditorConstants.LOG_FILENAME, encoding='utf-8')
    except OSError:
        # Nowhere to write the log; run without one
        package_logger.addHandler(logging.NullHandler())
        return package_logger
    handler.setFormatter(logging.Formatter(EditorConstants.LOG_FORMAT))
    package_logger.addHandler(handler)
    level = logging.getLevelName(settings.log_level)
    package_logger.setLevel(level if isinstance(level, int) else EditorConstants.DEFAULT_LOG_LEVEL)
    return package_logger
