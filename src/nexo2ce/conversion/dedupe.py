"""
Duplicate item key filtering.

Item keys are global within a namespace, so the same key defined in two
files would produce two CraftEngine items with one registry id. The first
file to define a key wins; later definitions are dropped with a warning.
"""

import logging
from pathlib import Path
from typing import Set

from .models import ItemDocument, namespaced_key


class DeduplicationGate:
    """Rejects item keys that an earlier file already provided."""

    def __init__(self, namespace: str):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.namespace = namespace
        # Namespaced keys accepted so far in this run
        self.accepted: Set[str] = set()
        self.duplicates = 0

    def filter(self, items: ItemDocument, source_file: Path | str) -> ItemDocument:
        """Return the items of one file whose keys were not seen before.

        Args:
            items: Raw item definitions of the file, in file order
            source_file: File the items came from (used in warnings)

        Returns:
            New mapping with the surviving items, original order preserved
        """
        surviving: ItemDocument = {}

        for key, definition in items.items():
            full_key = namespaced_key(self.namespace, key)
            if full_key in self.accepted:
                self.duplicates += 1
                self.logger.warning(
                    f"Duplicate item key {full_key} in {source_file}, skipping"
                )
                continue
            self.accepted.add(full_key)
            surviving[key] = definition

        return surviving
