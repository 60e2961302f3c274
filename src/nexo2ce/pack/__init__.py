"""
Resource pack plumbing around the conversion engine: asset copying,
pack.yml generation and working folder bootstrap.
"""

from .assets import copy_assets
from .manifest import PackInfo, generate_pack_yml
from .workspace import clear_logs, init_folders

__all__ = [
    "copy_assets",
    "PackInfo",
    "generate_pack_yml",
    "clear_logs",
    "init_folders",
]
