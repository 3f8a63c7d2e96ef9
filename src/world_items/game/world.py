from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from ..exceptions import UnknownItemError
from .kinds import ItemKind
from .models import (
    Boots,
    Cask,
    Chest,
    Clothing,
    Farm,
    Furniture,
    Hat,
    Item,
    Location,
    Player,
    Ring,
    StorageFurniture,
    WorldObject,
)

logger = logging.getLogger(__name__)

HAY_ITEM_ID = "178"

# Concrete model class for each item kind.
MODEL_TYPES: Dict[ItemKind, Type[Item]] = {
    ItemKind.ITEM: Item,
    ItemKind.OBJECT: WorldObject,
    ItemKind.CHEST: Chest,
    ItemKind.CASK: Cask,
    ItemKind.FURNITURE: Furniture,
    ItemKind.STORAGE_FURNITURE: StorageFurniture,
    ItemKind.HAT: Hat,
    ItemKind.RING: Ring,
    ItemKind.BOOTS: Boots,
    ItemKind.CLOTHING: Clothing,
}


@dataclass(frozen=True)
class ItemDefinition:
    item_id: str
    name: str
    kind: ItemKind = ItemKind.OBJECT
    max_stack: int = 999


class ItemCatalog:
    """
    In-memory registry of item definitions used to create fresh items.

    Ships with the handful of objects the scanner itself needs to create; a
    snapshot or caller can register more.
    """

    def __init__(self) -> None:
        self._defs: Dict[str, ItemDefinition] = {}
        self._load_defaults()

    def _load_defaults(self) -> None:
        self.register(ItemDefinition(item_id=HAY_ITEM_ID, name="Hay"))
        self.register(ItemDefinition(item_id="0", name="Weeds"))
        self.register(ItemDefinition(item_id="390", name="Stone"))
        self.register(ItemDefinition(item_id="294", name="Twig"))
        self.register(ItemDefinition(item_id="388", name="Wood"))
        self.register(ItemDefinition(item_id="130", name="Chest", kind=ItemKind.CHEST, max_stack=1))

    def register(self, definition: ItemDefinition) -> None:
        self._defs[definition.item_id] = definition

    def get(self, item_id: str) -> ItemDefinition:
        try:
            return self._defs[item_id]
        except KeyError as exc:
            raise UnknownItemError(f"Unknown item id: {item_id}") from exc

    def create(self, item_id: str, stack: int = 1) -> Item:
        definition = self.get(item_id)
        model = MODEL_TYPES[definition.kind]
        item = model(name=definition.name, item_id=definition.item_id, stack=stack)
        item.max_stack = definition.max_stack
        return item


@dataclass
class World:
    """A loaded world snapshot.

    Implements the location, player, farm and item-factory provider protocols
    so it can be handed straight to :class:`WorldItemScanner`.
    """

    locations: List[Location] = field(default_factory=list)
    player: Player = field(default_factory=Player)
    farm: Optional[Farm] = None
    catalog: ItemCatalog = field(default_factory=ItemCatalog)

    def get_locations(self) -> List[Location]:
        return list(self.locations)

    def get_player(self) -> Player:
        return self.player

    def get_farm(self) -> Optional[Farm]:
        return self.farm

    def create_object(self, item_id: str, stack: int = 1) -> Item:
        item = self.catalog.create(item_id, stack)
        logger.debug("Created %s (id=%s) x%d", item.name, item_id, stack)
        return item


__all__ = ["HAY_ITEM_ID", "MODEL_TYPES", "ItemDefinition", "ItemCatalog", "World"]
