"""
Path-related settings for nexo2ce.
"""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class PathSettings:
    """Manages input/output folder settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def input_path(self) -> Path:
        """Get the Nexo input folder."""
        return Path(self._get_str("paths/input", "input") or "input")

    @input_path.setter
    def input_path(self, value: Path | str) -> None:
        """Set the Nexo input folder."""
        self.settings.setValue("paths/input", str(value))
        self.settings.sync()

    @property
    def output_path(self) -> Path:
        """Get the CraftEngine output folder."""
        return Path(self._get_str("paths/output", "output") or "output")

    @output_path.setter
    def output_path(self, value: Path | str) -> None:
        """Set the CraftEngine output folder."""
        self.settings.setValue("paths/output", str(value))
        self.settings.sync()

    @property
    def items_path(self) -> Path:
        """Get the Nexo items folder (derived from input_path)."""
        return self.input_path / "items"

    @property
    def assets_path(self) -> Path:
        """Get the Nexo pack assets folder (derived from input_path)."""
        return self.input_path / "pack" / "assets"
