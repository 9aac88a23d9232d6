"""
Preferences Service

Key-value store for player preferences such as the color theme.
"""

import threading
from typing import Dict, Optional


class PreferenceKeys:
    THEME = 'theme'


class Theme:
    LIGHT = 'light'
    DARK = 'dark'

    ALL = (LIGHT, DARK)
    DEFAULT = DARK


class PreferencesService:
    """
    In-memory string preferences.

    Values are not persisted; a restart brings back the defaults.
    """

    def __init__(self):
        self._values: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        """
        Store a preference value.

        Raises:
            ValueError: If the value is not a string, or not a known theme for the theme key
        """
        if not isinstance(value, str):
            raise ValueError(f"Preference '{key}' must be a string")
        if key == PreferenceKeys.THEME and value not in Theme.ALL:
            raise ValueError(f"Unknown theme '{value}'. Expected one of: {', '.join(Theme.ALL)}")

        with self._lock:
            self._values[key] = value

    def get_theme(self) -> str:
        return self.get(PreferenceKeys.THEME, Theme.DEFAULT)


# Global service instance
_preferences_service = None


def get_preferences_service() -> Optional[PreferencesService]:
    """Get the global preferences service instance."""
    return _preferences_service


def initialize_preferences_service() -> PreferencesService:
    """Initialize the global preferences service instance."""
    global _preferences_service
    _preferences_service = PreferencesService()
    return _preferences_service
