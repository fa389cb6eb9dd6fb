"""
Employee Records Service Core Module.

Exports core utilities and configurations.
"""

from app.core.config import Settings, get_settings
from app.core.exceptions import StoreError
from app.core.logging import get_logger, setup_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "get_logger",
    "setup_logging",
    # Errors
    "StoreError",
]
