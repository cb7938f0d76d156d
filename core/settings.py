"""Persisted user preferences for NoEXIF."""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"
LOG_FILENAME = "noexif.log"


def get_settings_dir() -> Path:
    """Per-user directory holding settings and the log file."""
    local_app_data = os.environ.get("LOCALAPPDATA")
    if local_app_data:
        return Path(local_app_data) / "NoEXIF"
    return Path.home() / ".noexif"


class AppSettings:
    """Manages user preferences stored as JSON.

    Without a settings file the defaults are used and nothing is persisted.
    """

    DEFAULT_JPEG_QUALITY = 95
    DEFAULT_LOG_LEVEL = "INFO"
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __init__(self, settings_file: Optional[str] = None):
        self.settings_file = Path(settings_file) if settings_file else None

        self.jpeg_quality = self.DEFAULT_JPEG_QUALITY
        self.log_level = self.DEFAULT_LOG_LEVEL
        self.show_dialogs = True

        self.load_settings()

    def load_settings(self):
        """Load settings from file, keeping defaults for anything invalid."""
        if self.settings_file is None or not self.settings_file.exists():
            return

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading settings from {self.settings_file}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed settings file {self.settings_file}")
            return

        quality = data.get('jpeg_quality', self.jpeg_quality)
        if isinstance(quality, int) and not isinstance(quality, bool) and 1 <= quality <= 100:
            self.jpeg_quality = quality
        else:
            logger.warning(f"Invalid jpeg_quality {quality!r}, using {self.jpeg_quality}")

        level = str(data.get('log_level', self.log_level)).upper()
        if level in self.LOG_LEVELS:
            self.log_level = level
        else:
            logger.warning(f"Invalid log_level {level!r}, using {self.log_level}")

        self.show_dialogs = bool(data.get('show_dialogs', self.show_dialogs))

    def save_settings(self):
        """Save settings to file."""
        if self.settings_file is None:
            return

        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> Dict:
        return {
            'jpeg_quality': self.jpeg_quality,
            'log_level': self.log_level,
            'show_dialogs': self.show_dialogs,
        }
