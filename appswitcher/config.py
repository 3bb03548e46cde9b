import os
import json
import datetime
from typing import Any, Dict

MOST_USED_LIMIT: int = 5
RECENT_LIMIT: int = 5
MIN_MOST_USED_COUNT: int = 2  # launches before an app can be "most used"

# User configuration file path
USER_CONFIG_PATH: str = os.path.expanduser("~/.config/appswitcher/settings.json")

# Debug mode - logs every ranking rebuild
DEBUG_MODE: bool = os.environ.get("APPSWITCHER_DEBUG", "0") == "1"
DEBUG_LOG_PATH: str = os.path.expanduser("~/.local/share/appswitcher_debug.log")


# --- Dynamic Configuration Class ---

class Config:
    """
    Manages host settings loaded from the user's JSON file.

    The tracker never reads this object; the host passes the values in.
    """
    DEFAULT_MOST_USED_LIMIT: int = MOST_USED_LIMIT
    DEFAULT_RECENT_LIMIT: int = RECENT_LIMIT
    DEFAULT_FREQUENT_USE_HOURS: int = 72

    def __init__(self, config_path: str = USER_CONFIG_PATH):
        self.config_path = config_path
        self._user_config: Dict[str, Any] = {}

        self.most_used_limit: int = self.DEFAULT_MOST_USED_LIMIT
        self.recent_limit: int = self.DEFAULT_RECENT_LIMIT
        self.frequent_use_hours: int = self.DEFAULT_FREQUENT_USE_HOURS

        self.reload()

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user configuration from file."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                print(f"Ignoring unreadable config {self.config_path}: {e}")
                return {}
            if isinstance(data, dict):
                return data
        return {}

    def _positive_int(self, key: str, default: int) -> int:
        value = self._user_config.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return default
        return value

    def reload(self) -> None:
        """
        Reload configuration from disk, updating this object's attributes.

        Missing or invalid values fall back to the class defaults.
        """
        self._user_config = self._load_user_config()

        self.most_used_limit = self._positive_int(
            'most_used_limit', self.DEFAULT_MOST_USED_LIMIT
        )
        self.recent_limit = self._positive_int(
            'recent_limit', self.DEFAULT_RECENT_LIMIT
        )
        self.frequent_use_hours = self._positive_int(
            'frequent_use_hours', self.DEFAULT_FREQUENT_USE_HOURS
        )

    @property
    def frequent_use_window(self) -> datetime.timedelta:
        """How long after its last launch an app still counts as frequently used."""
        return datetime.timedelta(hours=self.frequent_use_hours)


# --- Singleton Instance ---
# Shared instance for hosts that want one.
settings = Config()
