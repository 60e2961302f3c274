"""
Static model templates shared by every converted pack.
"""

from typing import Any, Dict


def build_templates(namespace: str) -> Dict[str, Any]:
    """Return the 2D model template document for a namespace.

    ``${...}`` placeholders are filled in by CraftEngine from each item's
    template arguments.
    """
    return {
        "templates#models#2d": {
            f"{namespace}:model/generated": {
                "type": "minecraft:model",
                "path": "${model}",
                "generation": {
                    "parent": "minecraft:item/generated",
                    "textures": {"layer0": "${texture}"},
                },
            },
            f"{namespace}:model/simplified_generated": {
                "type": "minecraft:model",
                "path": "${path}",
                "generation": {
                    "parent": "minecraft:item/generated",
                    "textures": {"layer0": "${path}"},
                },
            },
        }
    }
