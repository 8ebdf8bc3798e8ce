"""
Configuration management for swiftblocks.

This module handles loading and accessing configuration values from config.yaml.
Parsing strictness and message completeness rules live here so they can be
changed without touching the parsers.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging


class ConfigManager:
    """
    Manages configuration loading and access for swiftblocks.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}

            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration root must be a mapping, got {type(loaded).__name__}")

            self._config = self._merge(self._get_default_config(), loaded)
            logging.info(f"Configuration loaded from {self.config_path}")

        except (OSError, ValueError, yaml.YAMLError) as e:
            logging.debug(f"Using default configuration: {e}")
            self._config = self._get_default_config()

    @staticmethod
    def _merge(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively overlay loaded values on the defaults."""
        merged = dict(defaults)
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = ConfigManager._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "paths": {
                "log_file": None
            },
            "parsing": {
                "reject_duplicate_subblocks": False
            },
            "message": {
                "required_blocks": ["1", "2", "4"],
                "enforce_block_order": True
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "logging.level")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("message.required_blocks")  # Returns ["1", "2", "4"]
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")

    @property
    def log_filename(self) -> Optional[str]:
        """Get log file name, None to log to the console only."""
        return self.get("paths.log_file")

    @property
    def reject_duplicate_subblocks(self) -> bool:
        """Whether a repeated sub-block code is an error instead of last-one-wins."""
        return bool(self.get("parsing.reject_duplicate_subblocks", False))

    @property
    def required_blocks(self) -> List[str]:
        """Get the ids of the blocks every message must contain."""
        return [str(block_id) for block_id in self.get("message.required_blocks", ["1", "2", "4"])]

    @property
    def enforce_block_order(self) -> bool:
        return bool(self.get("message.enforce_block_order", True))


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
