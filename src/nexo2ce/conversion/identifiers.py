"""
Custom model data bookkeeping.

Tracks which custom model data (CMD) values each material uses, reports
collisions as they happen and compacts the final usage into ranges for a
plain-text audit report.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple


def compact_ranges(values: Iterable[int]) -> List[str]:
    """Collapse integers into runs of consecutive values.

    Values are sorted first. A new run starts whenever the next value is
    not exactly one greater than the end of the current run, so repeated
    values stay visible as separate entries.

    >>> compact_ranges([9, 1, 2, 3, 5, 7, 8])
    ['1-3', '5', '7-9']
    """
    runs: List[Tuple[int, int]] = []
    for value in sorted(values):
        if runs and value == runs[-1][1] + 1:
            runs[-1] = (runs[-1][0], value)
        else:
            runs.append((value, value))

    return [str(start) if start == end else f"{start}-{end}" for start, end in runs]


class IdentifierTracker:
    """Records CMD usage per material and detects collisions.

    Maintains two indices:
    - usage: material -> CMD values in assignment order (kept for the report)
    - claims: material -> (CMD -> first item key), used for collision checks
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.usage: Dict[str, List[int]] = defaultdict(list)
        self.claims: Dict[str, Dict[int, str]] = defaultdict(dict)
        self.collisions = 0

    def register(self, material: str, custom_model_data: int, item_key: str) -> bool:
        """Record that an item uses a CMD value on a material.

        Args:
            material: Uppercase material name
            custom_model_data: CMD value assigned to the item
            item_key: Namespaced key of the item

        Returns:
            True if the value was free, False if another item already had it
        """
        self.usage[material].append(custom_model_data)

        owner = self.claims[material].get(custom_model_data)
        if owner is None:
            self.claims[material][custom_model_data] = item_key
            return True

        if owner != item_key:
            self.collisions += 1
            self.logger.warning(
                f"Custom model data collision on {material} {custom_model_data}: "
                f"{item_key} conflicts with {owner}"
            )
        return False

    def ranges(self) -> Dict[str, List[str]]:
        """Return compacted ranges per material, materials sorted by name."""
        return {
            material: compact_ranges(values)
            for material, values in sorted(self.usage.items())
            if values
        }

    def report(self) -> str:
        """Build the report text, one ``MATERIAL: ranges`` line per material."""
        return "\n".join(
            f"{material}: {', '.join(runs)}" for material, runs in self.ranges().items()
        )
