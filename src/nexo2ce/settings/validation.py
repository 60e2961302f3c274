"""
Settings validation system for nexo2ce.
"""

import logging
from typing import List, TYPE_CHECKING

from .conversion import is_valid_namespace
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings before a conversion run."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        namespace = self.settings.namespace
        if not namespace:
            errors.append("Namespace is not set")
        elif not is_valid_namespace(namespace):
            errors.append(
                f"Invalid namespace {namespace!r}: only a-z, 0-9, '_', '.' and '-' are allowed"
            )

        input_path = self.settings.input_path
        if not input_path.exists():
            errors.append(f"Input folder does not exist: {input_path}")
        elif not self.settings.items_path.is_dir():
            warnings.append(f"Input folder has no 'items' directory: {input_path}")

        if self.settings.copy_assets and not self.settings.assets_path.is_dir():
            warnings.append(f"No pack assets to copy: {self.settings.assets_path}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
