"""
Localization table for converted items and categories.
"""

import logging
from typing import Any, Dict

from .models import (
    ConvertedItems,
    ITEM_NAME_KEY,
    ItemDocument,
    LOCALE_LANGUAGE,
    LocaleEntries,
    category_locale_key,
    item_locale_key,
    namespaced_key,
)


class LocaleTable:
    """Collects display names into a single flat English table."""

    def __init__(self, namespace: str):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.namespace = namespace
        self.entries: LocaleEntries = {}

    def add_root_category(self) -> None:
        self.entries[category_locale_key(self.namespace, "name")] = self.namespace
        self.entries[category_locale_key(self.namespace, "lore")] = f"{self.namespace} Items"

    def add_category(self, name: str) -> None:
        self.entries[category_locale_key(self.namespace, name)] = name

    def add_items(self, items: ItemDocument, converted: ConvertedItems) -> None:
        """Record display names of the items that made it into the output.

        Items without ``itemname`` fall back to their raw key.
        """
        for key, definition in items.items():
            if namespaced_key(self.namespace, key) not in converted:
                continue
            self.entries[item_locale_key(self.namespace, key)] = self._display_name(
                key, definition
            )

    @staticmethod
    def _display_name(key: Any, definition: Any) -> str:
        name = definition.get(ITEM_NAME_KEY) if isinstance(definition, dict) else None
        return str(name) if name else str(key)

    def to_document(self) -> Dict[str, Dict[str, LocaleEntries]]:
        return {"i18n": {LOCALE_LANGUAGE: self.entries}}
