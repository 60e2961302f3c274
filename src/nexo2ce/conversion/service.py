"""
Main service for converting a Nexo item folder into CraftEngine configuration.

Walks the item tree file by file: load, drop duplicate keys, convert,
register the file's subcategory and locale entries. All generated tables
are kept in memory and written once every file has been processed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TYPE_CHECKING

from .categories import CategoryBuilder
from .dedupe import DeduplicationGate
from .identifiers import IdentifierTracker
from .loaders import (
    DEFAULT_DOCUMENT_SUFFIXES,
    DEFAULT_FOLDER_BLACKLIST,
    DocumentLoader,
    find_documents,
)
from .locale import LocaleTable
from .templates import build_templates
from .transformer import ItemTransformer

if TYPE_CHECKING:
    from ..settings import AppSettings

ITEMS_FOLDER = "items"
CONFIGURATION_FOLDER = "configuration"
OUTPUT_SUFFIX = ".yml"
I18N_FILE = "i18n.yml"
CATEGORIES_FILE = "categories.yml"
TEMPLATES_FILE = "templates.yml"
CMD_REPORT_FILE = "custom_model_data.txt"


@dataclass
class ConversionStats:
    """Counters collected over one conversion run."""
    files_found: int = 0
    files_converted: int = 0
    files_failed: int = 0
    items_converted: int = 0
    duplicates: int = 0
    collisions: int = 0


class ConversionService:
    """Converts Nexo item documents into a CraftEngine configuration tree.

    Each call to :meth:`run` creates fresh accumulators (accepted keys, CMD
    usage, categories, locale) that live only for that run and are passed
    to the components explicitly.
    """

    def __init__(
        self,
        namespace: str,
        folder_blacklist: Iterable[str] = DEFAULT_FOLDER_BLACKLIST,
        document_suffixes: Sequence[str] = DEFAULT_DOCUMENT_SUFFIXES,
        loader: Optional[DocumentLoader] = None,
    ):
        """Initialize the service.

        Args:
            namespace: Namespace for every generated key
            folder_blacklist: Directory names skipped while scanning
            document_suffixes: File suffixes treated as item documents
            loader: Document reader/writer (a default one is created if omitted)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.namespace = namespace
        self.folder_blacklist = list(folder_blacklist)
        self.document_suffixes = list(document_suffixes)
        self.loader = loader or DocumentLoader()
        self.stats = ConversionStats()

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "ConversionService":
        """Create a service configured from application settings."""
        return cls(
            namespace=settings.namespace,
            folder_blacklist=settings.folder_blacklist,
            document_suffixes=settings.document_suffixes,
        )

    def run(self, input_root: Path | str, output_root: Path | str) -> ConversionStats:
        """Convert ``<input_root>/items`` into ``<output_root>/configuration``.

        Never raises for per-file problems; the aggregate documents (locale,
        categories, templates, CMD report) are always written, even when no
        items were found.
        """
        input_root = Path(input_root)
        output_root = Path(output_root)
        items_folder = input_root / ITEMS_FOLDER
        configuration_folder = output_root / CONFIGURATION_FOLDER

        self.stats = ConversionStats()
        dedupe = DeduplicationGate(self.namespace)
        tracker = IdentifierTracker()
        categories = CategoryBuilder(self.namespace)
        locale = LocaleTable(self.namespace)
        locale.add_root_category()

        files = self._find_files(items_folder)
        self.stats.files_found = len(files)
        self.logger.info(f"Found {len(files)} item files to process")

        for item_file in files:
            # Output is always YAML, whatever the source format
            relative_path = item_file.relative_to(items_folder).with_suffix(OUTPUT_SUFFIX)
            self._convert_file(
                item_file,
                configuration_folder / ITEMS_FOLDER / relative_path,
                dedupe,
                tracker,
                categories,
                locale,
            )

        self.stats.duplicates = dedupe.duplicates
        self.stats.collisions = tracker.collisions

        self._write_aggregates(configuration_folder, output_root, categories, locale, tracker)
        self._log_summary()
        return self.stats

    def _find_files(self, items_folder: Path) -> List[Path]:
        if not items_folder.is_dir():
            self.logger.warning(f"Input items folder not found: {items_folder}")
            return []
        return find_documents(items_folder, self.folder_blacklist, self.document_suffixes)

    def _convert_file(
        self,
        item_file: Path,
        output_path: Path,
        dedupe: DeduplicationGate,
        tracker: IdentifierTracker,
        categories: CategoryBuilder,
        locale: LocaleTable,
    ) -> None:
        """Run the per-file pipeline for a single item document."""
        self.logger.debug(f"Processing {item_file}")
        document = self.loader.read(item_file)
        if document is None:
            self.stats.files_failed += 1
            self.logger.warning(f"Skipping unreadable item file: {item_file}")
            return

        items = dedupe.filter(document, item_file)
        if not items:
            self.logger.warning(f"No new items left in {item_file} after removing duplicates")
            return

        converted = ItemTransformer(self.namespace, tracker).transform(items)
        item_keys = list(converted)

        if converted:
            if self.loader.write(output_path, {"items": converted}):
                self.logger.info(f"Wrote CraftEngine items to: {output_path}")
            self.stats.items_converted += len(converted)
            self.stats.files_converted += 1

        locale.add_items(items, converted)
        subcategory = categories.add_subcategory(item_file, item_keys)
        if subcategory is not None:
            locale.add_category(item_file.stem)

    def _write_aggregates(
        self,
        configuration_folder: Path,
        output_root: Path,
        categories: CategoryBuilder,
        locale: LocaleTable,
        tracker: IdentifierTracker,
    ) -> None:
        if self.loader.write(configuration_folder / I18N_FILE, locale.to_document()):
            self.logger.info(f"Wrote {I18N_FILE}")

        if self.loader.write(configuration_folder / CATEGORIES_FILE, categories.to_document()):
            self.logger.info(f"Wrote {CATEGORIES_FILE}")

        if self.loader.write(
            configuration_folder / TEMPLATES_FILE, build_templates(self.namespace)
        ):
            self.logger.info(f"Wrote {TEMPLATES_FILE}")

        report = tracker.report()
        if self.loader.write_text(output_root / CMD_REPORT_FILE, f"{report}\n" if report else ""):
            self.logger.info(f"Wrote {CMD_REPORT_FILE}")

    def _log_summary(self) -> None:
        stats = self.stats
        self.logger.info(
            f"Conversion completed: {stats.items_converted} items from "
            f"{stats.files_converted}/{stats.files_found} files "
            f"({stats.files_failed} unreadable, {stats.duplicates} duplicates, "
            f"{stats.collisions} custom model data collisions)"
        )


def convert(
    input_root: Path | str,
    output_root: Path | str,
    namespace: str,
    folder_blacklist: Iterable[str] = DEFAULT_FOLDER_BLACKLIST,
) -> None:
    """Convert a Nexo item folder into CraftEngine configuration.

    Args:
        input_root: Nexo input folder (item documents under ``items/``)
        output_root: Output folder (configuration written under ``configuration/``)
        namespace: Namespace for every generated key
        folder_blacklist: Directory names skipped while scanning
    """
    ConversionService(namespace, folder_blacklist).run(input_root, output_root)
