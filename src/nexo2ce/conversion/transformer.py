"""
Nexo item definition to CraftEngine item conversion.

Supports two render modes:
- 3D items (``Pack.generate_model: false``) reference an existing model.
- 2D items (``Pack.texture``) go through the simplified generated template.
Anything else has no model CraftEngine could use and is left out.
"""

import logging
from typing import Any, Dict, Optional

from .identifiers import IdentifierTracker
from .models import (
    ConvertedItem,
    ConvertedItems,
    ItemDefinition,
    ItemDocument,
    ITEM_NAME_FORMAT,
    MATERIAL_KEY,
    MODEL_TYPE_3D,
    PACK_KEY,
    SIMPLIFIED_TEMPLATE_FORMAT,
    namespaced_key,
)


class ItemTransformer:
    """Converts Nexo item definitions into CraftEngine item records."""

    def __init__(self, namespace: str, tracker: IdentifierTracker):
        """Initialize the transformer.

        Args:
            namespace: Namespace prefixed to every generated key
            tracker: Run-wide CMD usage accumulator, updated as items convert
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.namespace = namespace
        self.tracker = tracker

    def transform(self, items: ItemDocument) -> ConvertedItems:
        """Convert the items of one file, keeping file order.

        The input mapping is never modified.
        """
        converted: ConvertedItems = {}

        for key, definition in items.items():
            record = self.transform_item(key, definition)
            if record is not None:
                converted[namespaced_key(self.namespace, key)] = record

        self.logger.info(
            f"Converted {len(converted)} of {len(items)} items to CraftEngine format"
        )
        return converted

    def transform_item(self, key: Any, definition: ItemDefinition) -> Optional[ConvertedItem]:
        """Convert a single item, or return None when it has no usable model."""
        if not isinstance(definition, dict):
            self.logger.debug(f"Item {key} is not a mapping, leaving it out")
            return None

        pack = definition.get(PACK_KEY)
        if not isinstance(pack, dict):
            pack = {}

        model = self._build_model(pack)
        if model is None:
            self.logger.debug(f"Item {key} has neither a 3D model nor a texture")
            return None

        full_key = namespaced_key(self.namespace, key)
        record: ConvertedItem = {}

        custom_model_data = pack.get("custom_model_data")
        if custom_model_data is not None:
            record["custom-model-data"] = custom_model_data

        material = definition.get(MATERIAL_KEY)
        if material is not None:
            material = str(material).upper()
            record["material"] = material

        record["data"] = {
            "item-name": ITEM_NAME_FORMAT.format(namespace=self.namespace, key=key)
        }
        record["model"] = model

        self._track(full_key, material, custom_model_data)
        return record

    def _build_model(self, pack: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Pick the render mode; first matching rule wins."""
        if pack.get("generate_model") is False:
            return {"type": MODEL_TYPE_3D, "path": pack.get("model")}

        texture = pack.get("texture")
        if texture:
            return {
                "template": SIMPLIFIED_TEMPLATE_FORMAT.format(namespace=self.namespace),
                "arguments": {"path": texture},
            }

        return None

    def _track(self, full_key: str, material: Optional[str], custom_model_data: Any) -> None:
        if custom_model_data is None:
            return
        if material is None:
            self.logger.warning(
                f"Item {full_key} has custom model data but no material, not tracked"
            )
            return
        if isinstance(custom_model_data, bool) or not isinstance(custom_model_data, int):
            self.logger.warning(
                f"Item {full_key} has non-integer custom model data "
                f"{custom_model_data!r}, not tracked"
            )
            return
        self.tracker.register(material, custom_model_data, full_key)
