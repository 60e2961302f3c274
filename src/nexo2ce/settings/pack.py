"""
pack.yml metadata settings for nexo2ce.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class PackSettings:
    """Manages the metadata written to pack.yml."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def author(self) -> str:
        return self._get_str("pack/author", "Unknown")

    @author.setter
    def author(self, value: str) -> None:
        self.settings.setValue("pack/author", value)
        self.settings.sync()

    @property
    def version(self) -> str:
        return self._get_str("pack/version", "0.0.1")

    @version.setter
    def version(self, value: str) -> None:
        self.settings.setValue("pack/version", value)
        self.settings.sync()

    @property
    def description(self) -> str:
        return self._get_str("pack/description", "Craft Engine Pack")

    @description.setter
    def description(self, value: str) -> None:
        self.settings.setValue("pack/description", value)
        self.settings.sync()
