"""
Category taxonomy for converted items.

Builds one root category per namespace and one hidden subcategory per
source file. The root category lists every subcategory by back-reference
(``#ns:name``) so the CraftEngine item browser shows a single entry that
expands into the files of the pack.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .models import (
    CategoryEntry,
    ICON_PREFERENCE_MARKER,
    ROOT_CATEGORY_LORE_FORMAT,
    ROOT_CATEGORY_NAME_FORMAT,
    SUBCATEGORY_NAME_FORMAT,
    namespaced_key,
)


def pick_icon(item_keys: Sequence[str]) -> str:
    """Return the first key containing "logo", else the first key.

    Returns an empty string for an empty sequence.
    """
    for key in item_keys:
        if ICON_PREFERENCE_MARKER in key:
            return key
    return item_keys[0] if item_keys else ""


class CategoryBuilder:
    """Accumulates the root category and per-file subcategories."""

    def __init__(self, namespace: str):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.namespace = namespace
        self.root_key = namespaced_key(namespace, namespace)
        self.categories: Dict[str, CategoryEntry] = {
            self.root_key: {
                "priority": 1,
                "name": ROOT_CATEGORY_NAME_FORMAT.format(namespace=namespace),
                "lore": [ROOT_CATEGORY_LORE_FORMAT.format(namespace=namespace)],
                "icon": "",
                "list": [],
            }
        }
        self._root_icon_set = False
        # Subcategory key -> file that produced it, for clash reporting
        self._sources: Dict[str, Path] = {}

    @property
    def root(self) -> CategoryEntry:
        return self.categories[self.root_key]

    def add_subcategory(self, source_file: Path, item_keys: List[str]) -> Optional[str]:
        """Register the subcategory of one source file.

        Args:
            source_file: File the items came from; its base name names the subcategory
            item_keys: Namespaced keys of the file's converted items, in file order

        Returns:
            The subcategory key, or None when the file has no converted items
        """
        name = Path(source_file).stem
        key = namespaced_key(self.namespace, name)

        if not item_keys:
            self.logger.warning(f"Skipping empty subcategory: {key}")
            return None

        previous = self._sources.get(key)
        if previous is not None:
            # Same base name in another folder; the later file replaces the entry
            self.logger.warning(
                f"Subcategory {key} from {source_file} overwrites the one from {previous}"
            )
        self._sources[key] = Path(source_file)

        icon = pick_icon(item_keys)
        self.categories[key] = {
            "name": SUBCATEGORY_NAME_FORMAT.format(namespace=self.namespace, name=name),
            "hidden": True,
            "icon": icon,
            "list": list(item_keys),
        }

        self.root["list"].append(f"#{key}")
        if not self._root_icon_set:
            self.root["icon"] = icon
            self._root_icon_set = True

        self.logger.info(f"Created subcategory: {key} with {len(item_keys)} items")
        return key

    def to_document(self) -> Dict[str, Dict[str, CategoryEntry]]:
        return {"categories": self.categories}
