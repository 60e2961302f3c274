"""
pack.yml generation for CraftEngine packs.
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

PACK_FILE = "pack.yml"


@dataclass
class PackInfo:
    """Metadata written to pack.yml."""
    author: str = "Unknown"
    version: str = "0.0.1"
    description: str = "Craft Engine Pack"
    namespace: str = "default"


def generate_pack_yml(output_root: Path | str, info: PackInfo) -> bool:
    """Write ``pack.yml`` into the output folder.

    Failures are logged, never raised.

    Returns:
        True if the file was written
    """
    pack_path = Path(output_root) / PACK_FILE
    try:
        pack_path.parent.mkdir(parents=True, exist_ok=True)
        pack_path.write_text(
            yaml.safe_dump(asdict(info), sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to generate {PACK_FILE}: {e}")
        return False

    logger.info(f"Generated {PACK_FILE} at: {pack_path}")
    return True
