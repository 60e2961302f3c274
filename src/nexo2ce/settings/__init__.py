"""
Settings package for nexo2ce.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from nexo2ce.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigError, ValidationResult
from .conversion import ConversionSettings, is_valid_namespace
from .pack import PackSettings

__all__ = [
    "AppSettings",
    "ConfigError",
    "ValidationResult",
    "ConversionSettings",
    "PackSettings",
    "is_valid_namespace",
]
