"""
Working folder bootstrap for command-line runs.
"""

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def init_folders(folders: Iterable[Path | str]) -> List[Path]:
    """Create the given folders if missing.

    Returns:
        Folders that were created by this call
    """
    created: List[Path] = []
    for folder in map(Path, folders):
        if folder.is_dir():
            logger.debug(f"Folder already exists: {folder}")
            continue
        folder.mkdir(parents=True, exist_ok=True)
        created.append(folder)
        logger.info(f"Created folder: {folder}")
    return created


def clear_logs(log_file: Path | str) -> int:
    """Delete the log file and its rotated backups (``<name>``, ``<name>.1``, ...).

    Only files named after the log file are removed; the folder holding
    them and anything else inside it are left alone. Must run before file
    logging is set up, otherwise the open log file would be removed under
    the handler.

    Returns:
        Number of files removed
    """
    log_file = Path(log_file)
    folder = log_file.parent
    if not folder.is_dir():
        return 0

    removed = 0
    for candidate in sorted(folder.iterdir()):
        if not candidate.is_file():
            continue
        if candidate.name == log_file.name or candidate.name.startswith(f"{log_file.name}."):
            candidate.unlink()
            removed += 1
    return removed
