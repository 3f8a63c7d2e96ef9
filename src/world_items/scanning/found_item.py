from __future__ import annotations

from dataclasses import dataclass

from ..game.interfaces import ItemProtocol


@dataclass(frozen=True)
class FoundItem:
    """An item found by a scan.

    Attributes:
        item: The item instance, shared with the world (not a copy).
        is_in_inventory: Whether the item's root was the player's inventory
            or equipped gear, rather than somewhere in the world.
    """

    item: ItemProtocol
    is_in_inventory: bool = False

    @property
    def count(self) -> int:
        """Number of items represented, never less than one."""
        return max(1, self.item.stack)
