"""
Module for converting Nexo item packs to CraftEngine.

Provides the conversion engine: document loading, duplicate filtering,
item conversion, custom model data tracking, category and locale
generation, and the service that runs them over an item folder.
"""

from .service import ConversionService, ConversionStats, convert
from .models import (
    ItemDefinition,
    ItemDocument,
    ConvertedItem,
    ConvertedItems,
    CategoryEntry,
    LocaleEntries,
)
from .loaders import DocumentLoader, find_documents
from .dedupe import DeduplicationGate
from .transformer import ItemTransformer
from .identifiers import IdentifierTracker, compact_ranges
from .categories import CategoryBuilder, pick_icon
from .locale import LocaleTable
from .templates import build_templates

# Public exports
__all__ = [
    # Main service
    "ConversionService",
    "ConversionStats",
    "convert",
    # Type aliases
    "ItemDefinition",
    "ItemDocument",
    "ConvertedItem",
    "ConvertedItems",
    "CategoryEntry",
    "LocaleEntries",
    # Component classes
    "DocumentLoader",
    "find_documents",
    "DeduplicationGate",
    "ItemTransformer",
    "IdentifierTracker",
    "compact_ranges",
    "CategoryBuilder",
    "pick_icon",
    "LocaleTable",
    "build_templates",
]
