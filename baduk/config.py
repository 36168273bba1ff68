"""Configuration management for the Go rules engine."""

import copy
import json
import logging
import os
from typing import Dict, Any

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager."""

    DEFAULT_CONFIG = {
        'game': {
            'board_size': 19
        },
        'display': {
            'show_coordinates': True
        },
        'logging': {
            'level': 'WARNING'
        }
    }

    def __init__(self, config_file: str = 'config.json'):
        """Initialize configuration.

        Args:
            config_file: Path to config file
        """
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file."""
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    self.config = json.load(f)
                # Merge with defaults for any missing keys
                self._merge_defaults()
            except (OSError, ValueError) as e:
                logger.error("Error loading config %s: %s", self.config_file, e)
                self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        else:
            self.config = copy.deepcopy(self.DEFAULT_CONFIG)
            self.save()

    def save(self) -> None:
        """Save configuration to file."""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_file, e)

    def _merge_defaults(self) -> None:
        """Merge default config with loaded config."""
        if not isinstance(self.config, dict):
            raise ValueError("config root must be an object")
        for key, value in self.DEFAULT_CONFIG.items():
            if key not in self.config or not isinstance(self.config[key], dict):
                self.config[key] = copy.deepcopy(value)
            elif isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    if sub_key not in self.config[key]:
                        self.config[key][sub_key] = sub_value

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value.

        Args:
            section: Configuration section
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value
        """
        if section in self.config and key in self.config[section]:
            return self.config[section][key]
        return default

    def get_board_size(self) -> int:
        """Get the board size for new games.

        Returns:
            Board size (falls back to 19 if the stored value is unusable)
        """
        size = self.get('game', 'board_size', 19)
        if not isinstance(size, int) or isinstance(size, bool):
            logger.warning("Ignoring invalid board size %r", size)
            return 19
        return size

    def get_log_level(self) -> str:
        """Get the logging level name.

        Returns:
            Level name such as 'INFO' or 'DEBUG'
        """
        level = str(self.get('logging', 'level', 'WARNING')).upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            return 'WARNING'
        return level

    def show_coordinates(self) -> bool:
        return bool(self.get('display', 'show_coordinates', True))
