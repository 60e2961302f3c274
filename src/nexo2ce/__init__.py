"""
nexo2ce: Nexo to CraftEngine pack converter

Converts Nexo item definitions into CraftEngine item, category, locale
and template configuration, and carries the pack assets over.
"""

__version__ = "0.1.0"
__author__ = "nexo2ce Contributors"

# Core service imports
from .conversion import ConversionService, ConversionStats, convert
from .settings import AppSettings
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    "ConversionService",
    "ConversionStats",
    "convert",

    # Settings
    "AppSettings",

    # Logging
    "setup_logging",
]
