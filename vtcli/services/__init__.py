"""
Service Layer

Service classes for common operations.
"""

from vtcli.services.config_service import ConfigService

__all__ = [
    "ConfigService",
]
