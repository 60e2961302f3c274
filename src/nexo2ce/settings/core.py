"""
Core settings management for nexo2ce.
"""

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QSettings

from .types import ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .conversion import ConversionSettings
from .pack import PackSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to persistent settings with automatic
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default", settings_file: Optional[Path | str] = None):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Explicit INI file to use instead of the platform
                           default location
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("nexo2ce", "nexo2ce")
        self.profile = profile

        # Use profile as a group to create hierarchy: nexo2ce/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._conversion = ConversionSettings(self.settings)
        self._pack = PackSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def conversion(self) -> ConversionSettings:
        """Access conversion settings subsystem."""
        return self._conversion

    @property
    def pack(self) -> PackSettings:
        """Access pack.yml settings subsystem."""
        return self._pack

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def input_path(self) -> Path:
        """Get the Nexo input folder."""
        return self._paths.input_path

    @input_path.setter
    def input_path(self, value: Path | str) -> None:
        """Set the Nexo input folder."""
        self._paths.input_path = value

    @property
    def output_path(self) -> Path:
        """Get the CraftEngine output folder."""
        return self._paths.output_path

    @output_path.setter
    def output_path(self, value: Path | str) -> None:
        """Set the CraftEngine output folder."""
        self._paths.output_path = value

    @property
    def items_path(self) -> Path:
        """Get the Nexo items folder (derived from input_path)."""
        return self._paths.items_path

    @property
    def assets_path(self) -> Path:
        """Get the Nexo pack assets folder (derived from input_path)."""
        return self._paths.assets_path

    # === CONVERSION SETTINGS (DELEGATED) ===

    @property
    def namespace(self) -> str:
        """Get the namespace for generated keys."""
        return self._conversion.namespace

    @namespace.setter
    def namespace(self, value: str) -> None:
        """Set the namespace for generated keys."""
        self._conversion.namespace = value

    @property
    def folder_blacklist(self) -> List[str]:
        """Get directory names skipped while scanning."""
        return self._conversion.folder_blacklist

    @folder_blacklist.setter
    def folder_blacklist(self, value: List[str]) -> None:
        """Set directory names skipped while scanning."""
        self._conversion.folder_blacklist = value

    @property
    def document_suffixes(self) -> List[str]:
        """Get file suffixes treated as item documents."""
        return self._conversion.document_suffixes

    @document_suffixes.setter
    def document_suffixes(self, value: List[str]) -> None:
        """Set file suffixes treated as item documents."""
        self._conversion.document_suffixes = value

    @property
    def copy_assets(self) -> bool:
        """Check if pack assets should be copied before conversion."""
        return self._conversion.copy_assets

    @copy_assets.setter
    def copy_assets(self, value: bool) -> None:
        """Set whether pack assets are copied before conversion."""
        self._conversion.copy_assets = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path."""
        return self._logging.log_file_path

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        """Set log file path."""
        self._logging.log_file_path = value

    @property
    def clear_logs_on_startup(self) -> bool:
        """Check if old log files are deleted before each run."""
        return self._logging.clear_logs_on_startup

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
