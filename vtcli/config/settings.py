"""
Configuration Settings

Module-level access to the vt configuration.
Backed by a lazily created ConfigService.
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional

from vtcli.services.config_service import ConfigService

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".vt" / "config.json"

# Global config service instance
_config_service: Optional[ConfigService] = None


def _get_config_service() -> ConfigService:
    """Get or create global config service instance."""
    global _config_service
    if _config_service is None:
        _config_service = ConfigService(config_path=CONFIG_PATH)
    return _config_service


def reset_config_service() -> None:
    """Drop the cached service so the next call re-reads CONFIG_PATH."""
    global _config_service
    _config_service = None


def load_config() -> Dict[str, Any]:
    """
    Load ~/.vt/config.json layered over the defaults.
    Raises ValueError if the file exists but is unreadable or not valid JSON.
    """
    return _get_config_service().load()


def get_setting(key: str, default: Any = None) -> Any:
    """Look up a (dot-notation) key in the loaded configuration."""
    return _get_config_service().get(key, default)
