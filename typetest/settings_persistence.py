"""Settings persistence for user defaults.

Stores the preferred word count and word sources in an OS-appropriate
location so they survive between runs. Command line options override them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import GameConstants

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Manages persistent storage of user defaults.
    
    Settings are stored in a JSON file in the user's config directory.
    Unreadable or invalid entries are ignored with a warning.
    """
    
    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings persistence."""
        self._config_dir = Path(config_dir or platformdirs.user_config_dir(GameConstants.APP_NAME))
        self._settings_file = self._config_dir / GameConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file
    
    def _ensure_config_dir(self) -> None:
        """Ensure the config directory exists."""
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")
    
    def _load_raw(self) -> Dict[str, Any]:
        if self._settings_cache is not None:
            return self._settings_cache
        
        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache
        
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            data = {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache
    
    def load_settings(self) -> Dict[str, Any]:
        """Load the stored settings, dropping invalid values.
        
        Returns:
            Dictionary of valid settings. Empty dict if nothing is stored.
        """
        settings = {}
        for key, value in self._load_raw().items():
            if self.validate_setting(key, value):
                settings[key] = value
            else:
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
        return settings
    
    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically.
        
        Args:
            settings: Dictionary of settings to save.
            
        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()
        
        # Use atomic write pattern (temp file + rename)
        temp_file = self._settings_file.with_suffix('.tmp')
        
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = dict(settings)
            return True
            
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False
    
    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.
        
        Args:
            key: Setting key name.
            value: Setting value to validate.
            
        Returns:
            True if setting is valid, False otherwise.
        """
        if value is None:
            return True  # None is valid (means "not set")
        
        if key in ('word_file', 'corpus_file'):
            return isinstance(value, str) and bool(value)
        
        if key == 'word_count':
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                return False
            return GameConstants.MIN_WORD_COUNT <= value <= GameConstants.MAX_WORD_COUNT
        
        # Unknown settings are considered valid (forward compatibility)
        return True
    
    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance.
    
    Returns:
        The singleton SettingsPersistence instance.
    """
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
