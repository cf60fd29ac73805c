#!/usr/bin/env python3
"""
Preferences API Backend
Persists small user preferences (the dashboard theme) as a JSON file
in the config directory
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

THEME_KEY = 'ai-tools-theme'
THEMES = ('light', 'dark')
DEFAULT_THEME = 'light'


def get_config_directory() -> Path:
    """Get the config directory path."""
    config_dir = os.environ.get('TOOLBOX_CATALOG_CONFIG_DIR')
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/toolbox-catalog
    return Path.home() / '.config' / 'toolbox-catalog'


class PreferenceManager:
    def __init__(self, preferences_file: Optional[Path] = None, default_theme: str = DEFAULT_THEME):
        self._preferences_file = preferences_file
        self.default_theme = default_theme if default_theme in THEMES else DEFAULT_THEME
        self._lock = threading.RLock()

    @property
    def preferences_file(self) -> Path:
        # Resolved lazily so the config dir can be changed after import
        if self._preferences_file is not None:
            return self._preferences_file
        return get_config_directory() / 'preferences.json'

    def _load(self) -> Dict[str, str]:
        path = self.preferences_file
        if not path.exists():
            return {}
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, str]) -> None:
        path = self.preferences_file
        path.parent.mkdir(parents=True, exist_ok=True)
        # Readers see either the old file or the new one, never a partial write
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix='.preferences-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def get(self, key: str) -> Optional[str]:
        """Get a stored preference, or None if absent"""
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Store a preference"""
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def get_theme(self) -> str:
        theme = self.get(THEME_KEY)
        return theme if theme in THEMES else self.default_theme

    def set_theme(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Invalid theme: {theme!r}. Expected one of: {', '.join(THEMES)}")
        self.set(THEME_KEY, theme)
        logger.info("Theme set to %s", theme)
        return theme

    def toggle_theme(self) -> str:
        with self._lock:
            return self.set_theme('light' if self.get_theme() == 'dark' else 'dark')


# Global preference manager instance
preference_manager = PreferenceManager()
