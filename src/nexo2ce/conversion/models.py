"""
Data models for Nexo to CraftEngine conversion.

Contains type definitions and output constants used throughout the
conversion package. Keeps the dict-based approach since both the source
documents and the generated configuration are plain YAML mappings.
"""

from typing import Any, Dict, TypeAlias

# Type aliases for clarity
ItemDefinition: TypeAlias = Dict[str, Any]
"""A single Nexo item definition (material, itemname, Pack, ...)."""

ItemDocument: TypeAlias = Dict[str, ItemDefinition]
"""A parsed Nexo items file: item key -> item definition."""

ConvertedItem: TypeAlias = Dict[str, Any]
"""A single CraftEngine item record."""

ConvertedItems: TypeAlias = Dict[str, ConvertedItem]
"""Maps namespaced item key (ns:key) to its CraftEngine item record."""

CategoryEntry: TypeAlias = Dict[str, Any]
"""A single CraftEngine category record (root or subcategory)."""

LocaleEntries: TypeAlias = Dict[str, str]
"""Flat locale table: translation key -> display text."""


# Nexo source keys
PACK_KEY = "Pack"
MATERIAL_KEY = "material"
ITEM_NAME_KEY = "itemname"

# CraftEngine output formats
ITEM_NAME_FORMAT = "<!i><white><i18n:item.{namespace}.{key}></white>"
ROOT_CATEGORY_NAME_FORMAT = "<!i><white><i18n:category.{namespace}.name></white>"
ROOT_CATEGORY_LORE_FORMAT = "<!i><gray><i18n:category.{namespace}.lore>"
SUBCATEGORY_NAME_FORMAT = "<!i><green><i18n:category.{namespace}.{name}></green>"

MODEL_TYPE_3D = "minecraft:model"
SIMPLIFIED_TEMPLATE_FORMAT = "{namespace}:model/simplified_generated"

# Category icon preference
ICON_PREFERENCE_MARKER = "logo"

# Locale language of the generated table
LOCALE_LANGUAGE = "en"


def namespaced_key(namespace: str, key: Any) -> str:
    """Return the registry key ``<namespace>:<key>``."""
    return f"{namespace}:{key}"


def item_locale_key(namespace: str, key: Any) -> str:
    return f"item.{namespace}.{key}"


def category_locale_key(namespace: str, name: str) -> str:
    return f"category.{namespace}.{name}"

