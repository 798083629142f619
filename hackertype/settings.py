"""Persistent user settings.

Settings are stored as JSON in an OS-appropriate config directory and
survive application restarts. Missing, unreadable or malformed files are
never fatal: the defaults are used and a warning is logged.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import DisplayConstants

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """User preferences for a typing session."""
    source: str = DisplayConstants.DEFAULT_SOURCE
    speed: int = DisplayConstants.DEFAULT_SPEED
    foreground: str = DisplayConstants.DEFAULT_FOREGROUND
    background: str = DisplayConstants.DEFAULT_BACKGROUND
    tab_size: int = DisplayConstants.DEFAULT_TAB_SIZE


def validate_setting(key: str, value: Any) -> bool:
    """Validate a setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if the value is acceptable for ``key``. Unknown keys are
        considered valid (forward compatibility).
    """
    # bool is an int subclass; never accept it as a number
    if key == 'speed':
        return (isinstance(value, int) and not isinstance(value, bool)
                and 1 <= value <= DisplayConstants.MAX_SPEED)
    if key == 'tab_size':
        return (isinstance(value, int) and not isinstance(value, bool)
                and 0 <= value <= DisplayConstants.MAX_TAB_SIZE)
    if key in ('source', 'foreground', 'background'):
        return isinstance(value, str) and bool(value.strip())
    return True


class SettingsPersistence:
    """Reads and writes :class:`Settings` in the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir or platformdirs.user_config_dir(DisplayConstants.APP_NAME))
        self._settings_file = self._config_dir / DisplayConstants.SETTINGS_FILENAME

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _load_raw(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> Settings:
        """Load settings, falling back to defaults for anything invalid."""
        data = self._load_raw()
        known = {f.name for f in fields(Settings)}
        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if not validate_setting(key, value):
                logger.warning(f"Ignoring invalid value for setting {key!r}: {value!r}")
                continue
            values[key] = value
        return Settings(**values)

    def save(self, settings: Settings) -> bool:
        """Save settings to disk atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")
            return False

        # Write to a temp file, then rename over the real one
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(asdict(settings), f, indent=2)
            temp_file.replace(self._settings_file)
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False
