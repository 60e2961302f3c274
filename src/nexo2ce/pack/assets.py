"""
Resource pack asset copying.

Nexo keeps textures and models under ``<input>/pack/assets``; CraftEngine
reads them from ``<output>/resourcepack/assets``. Files are copied as-is.
"""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_tree(source: Path, destination: Path) -> int:
    """Recursively copy a folder and its contents.

    Returns:
        Number of files copied
    """
    destination.mkdir(parents=True, exist_ok=True)
    copied = 0

    for entry in sorted(source.iterdir(), key=lambda p: p.name):
        target = destination / entry.name
        if entry.is_dir():
            copied += copy_tree(entry, target)
        elif entry.is_file():
            shutil.copy2(entry, target)
            logger.debug(f"Copied file: {entry} -> {target}")
            copied += 1

    return copied


def copy_assets(input_root: Path | str, output_root: Path | str) -> int:
    """Copy ``<input_root>/pack/assets`` to ``<output_root>/resourcepack/assets``.

    A missing source folder is logged and treated as nothing to copy.
    """
    source = Path(input_root) / "pack" / "assets"
    destination = Path(output_root) / "resourcepack" / "assets"

    if not source.is_dir():
        logger.warning(f"Source folder not found: {source}")
        return 0

    copied = copy_tree(source, destination)
    logger.info(f"Pack assets copied to: {destination} ({copied} files)")
    return copied
