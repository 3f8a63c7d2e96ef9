"""
World Items package root.

Finds every item the player owns across the game world: placed in
locations, stored in chests and furniture, carried, worn, or stockpiled as
hay. Domain logic stays engine-agnostic and is fed through the provider
protocols in :mod:`world_items.game.interfaces`.
"""

__version__ = "0.1.0"

from .scanning import FoundItem, WorldItemScanner

__all__ = [
    "__version__",
    "FoundItem",
    "WorldItemScanner",
]
