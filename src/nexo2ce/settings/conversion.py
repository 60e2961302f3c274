"""
Conversion-related settings for nexo2ce.
"""

import logging
import re
from typing import List, Optional, Sequence, TYPE_CHECKING, cast

from ..conversion.loaders import DEFAULT_DOCUMENT_SUFFIXES, DEFAULT_FOLDER_BLACKLIST

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

NAMESPACE_PATTERN = re.compile(r"^[a-z0-9_.-]+$")

DEFAULT_NAMESPACE = "minecraft"


def is_valid_namespace(value: str) -> bool:
    """Check a namespace against the resource location rules."""
    return bool(NAMESPACE_PATTERN.match(value))


class ConversionSettings:
    """Manages namespace, folder blacklist and document type settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_list(self, key: str, default: Optional[Sequence[str]] = None) -> List[str]:
        """Type-safe list retrieval from settings.

        INI storage returns single-element lists as a plain string, so it is
        folded back into a list here.
        """
        if default is None:
            default = []
        if not self.settings.contains(key):
            return list(default)
        value = self.settings.value(key)
        if isinstance(value, list):
            return [str(item) for item in cast(list[object], value) if item is not None]
        if isinstance(value, str):
            return [value] if value else []
        return []

    def _set_list(self, key: str, value: List[str]) -> None:
        # Empty lists are stored as an empty string so they read back as []
        self.settings.setValue(key, list(value) if value else "")
        self.settings.sync()

    @property
    def namespace(self) -> str:
        """Get the namespace for generated keys."""
        return self._get_str("conversion/namespace", DEFAULT_NAMESPACE)

    @namespace.setter
    def namespace(self, value: str) -> None:
        """Set the namespace for generated keys."""
        if is_valid_namespace(value):
            self.settings.setValue("conversion/namespace", value)
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid namespace: {value!r}, keeping current: {self.namespace}"
            )

    @property
    def folder_blacklist(self) -> List[str]:
        """Get directory names skipped while scanning the items folder."""
        return self._get_list("conversion/folder_blacklist", DEFAULT_FOLDER_BLACKLIST)

    @folder_blacklist.setter
    def folder_blacklist(self, value: List[str]) -> None:
        """Set directory names skipped while scanning the items folder."""
        self._set_list("conversion/folder_blacklist", value)

    @property
    def document_suffixes(self) -> List[str]:
        """Get file suffixes treated as item documents."""
        return self._get_list("conversion/document_suffixes", DEFAULT_DOCUMENT_SUFFIXES)

    @document_suffixes.setter
    def document_suffixes(self, value: List[str]) -> None:
        """Set file suffixes treated as item documents."""
        normalized = [s if s.startswith(".") else f".{s}" for s in value]
        self._set_list("conversion/document_suffixes", normalized)

    @property
    def copy_assets(self) -> bool:
        """Check if pack assets should be copied before conversion."""
        return self._get_bool("conversion/copy_assets", True)

    @copy_assets.setter
    def copy_assets(self, value: bool) -> None:
        """Set whether pack assets are copied before conversion."""
        self.settings.setValue("conversion/copy_assets", value)
        self.settings.sync()
