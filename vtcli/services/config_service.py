"""
Configuration Service

Service class for the vt user configuration (~/.vt/config.json).
"""

import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger("vt.ConfigService")

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "WARNING",
    "banner": {
        "animate": True,
    },
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigService:
    """
    Service class for configuration management.

    Provides:
    - Configuration loading (missing file means defaults)
    - Dot-notation lookups
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config service.

        Args:
            config_path: Path to config file
        """
        if config_path is None:
            config_path = Path.home() / ".vt" / "config.json"

        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file, layered over the defaults.

        Returns:
            Configuration dictionary

        Raises:
            ValueError: If config file is unreadable, invalid JSON or not an object
        """
        if not self.config_path.exists():
            logger.debug(f"No config file at {self.config_path}, using defaults")
            self._config = copy.deepcopy(DEFAULT_CONFIG)
            return self.get_all()

        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            logger.debug(f"Cannot read {self.config_path}: {e}")
            raise ValueError(f"Cannot read {self.config_path}: {e.strerror or e}")
        except json.JSONDecodeError as e:
            logger.debug(f"Error parsing config.json: {e}")
            raise ValueError(
                f"Error parsing {self.config_path}: {e}\n"
                "Please ensure config.json is valid JSON."
            )

        if not isinstance(data, dict):
            raise ValueError(f"{self.config_path} must contain a JSON object")

        self._config = _merge(DEFAULT_CONFIG, data)
        logger.info(f"Configuration loaded from {self.config_path}")
        return self.get_all()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key (supports dot notation: "banner.animate")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self._config
        for k in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
            if value is None:
                return default
        return value

    def get_all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)
