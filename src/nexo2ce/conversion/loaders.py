"""
File loaders and writers for Nexo item documents.

Handles reading and parsing YAML (PyYAML) and JSON (orjson) documents,
writing generated CraftEngine configuration back to YAML, and enumerating
the item folder tree in a deterministic order.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

import orjson
import yaml

from .models import ItemDocument

DEFAULT_DOCUMENT_SUFFIXES = (".yml", ".yaml")
DEFAULT_FOLDER_BLACKLIST = ("nexo_defaults",)
JSON_SUFFIXES = (".json",)


class DocumentLoader:
    """Reads structured documents and writes generated configuration."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("DocumentLoader initialized")

    def read(self, document_path: Path) -> Optional[ItemDocument]:
        """Read a document and return its top-level mapping.

        Parse errors, unreadable files, empty content and non-mapping top
        levels are all reported as a warning and return None so that the
        caller can skip the file and keep going.

        Args:
            document_path: Path to the YAML or JSON document

        Returns:
            Mapping of item key -> item definition, or None on failure
        """
        try:
            if document_path.suffix.lower() in JSON_SUFFIXES:
                with document_path.open("rb") as f:  # orjson works with bytes
                    data = orjson.loads(f.read())
            else:
                with document_path.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, orjson.JSONDecodeError) as e:
            self.logger.warning(f"Failed to read document {document_path}: {e}")
            return None

        if not data:
            self.logger.warning(f"Document is empty: {document_path}")
            return None

        if not isinstance(data, dict):
            self.logger.warning(
                f"Document {document_path} does not contain a mapping "
                f"(got {type(data).__name__})"
            )
            return None

        return data  # type: ignore[return-value]

    def write(self, document_path: Path, data: Any) -> bool:
        """Write data as YAML, creating parent folders as needed.

        Returns:
            True if the document was written, False otherwise
        """
        try:
            document_path.parent.mkdir(parents=True, exist_ok=True)
            text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
            document_path.write_text(text, encoding="utf-8")
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Failed to write YAML file at {document_path}: {e}")
            return False

        self.logger.debug(f"YAML file written to {document_path}")
        return True

    def write_text(self, document_path: Path, text: str) -> bool:
        """Write a plain-text report, creating parent folders as needed."""
        try:
            document_path.parent.mkdir(parents=True, exist_ok=True)
            document_path.write_text(text, encoding="utf-8")
        except OSError as e:
            self.logger.error(f"Failed to write text file at {document_path}: {e}")
            return False

        self.logger.debug(f"Text file written to {document_path}")
        return True


def find_documents(
    folder: Path,
    blacklist: Iterable[str] = (),
    suffixes: Sequence[str] = DEFAULT_DOCUMENT_SUFFIXES,
) -> List[Path]:
    """Recursively list document files under a folder.

    Entries of each directory are visited in name order, so the result is
    stable between runs. Directories whose name is blacklisted are skipped
    together with everything below them. Symlinked directories are not
    followed, and folders that cannot be listed are logged and skipped.

    Args:
        folder: Root folder to scan
        blacklist: Directory names to skip
        suffixes: Accepted file suffixes (case-insensitive)

    Returns:
        List of matching file paths
    """
    logger = logging.getLogger(f"{__name__}.find_documents")
    skipped = set(blacklist)
    accepted = tuple(s.lower() for s in suffixes)
    results: List[Path] = []

    try:
        entries = sorted(folder.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f"Cannot read folder {folder}: {e}")
        return results

    for entry in entries:
        if entry.is_dir():
            if entry.is_symlink():
                logger.warning(f"Skipped symlinked folder: {entry}")
                continue
            if entry.name in skipped:
                logger.warning(f"Skipped blacklisted folder: {entry}")
                continue
            results.extend(find_documents(entry, skipped, accepted))
        elif entry.is_file() and entry.suffix.lower() in accepted:
            results.append(entry)

    return results
