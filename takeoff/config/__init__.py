"""Takeoff configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
"""

from takeoff.config.settings import settings
from takeoff.config.errors import TakeoffError, ValidationError, CatalogError

__all__ = [
    "settings",
    "TakeoffError",
    "ValidationError",
    "CatalogError",
]
