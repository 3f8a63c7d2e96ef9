from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .kinds import BuildingKind, CharacterKind, ItemKind, LocationKind

# Models compare by identity: two weeds on different tiles are different items.


@dataclass(eq=False)
class Item:
    """Base domain item. ``kind`` is the tag the scanner dispatches on."""

    name: str
    item_id: str = ""
    kind: ItemKind = ItemKind.ITEM
    stack: int = 1
    max_stack: int = 1

    def maximum_stack_size(self) -> int:
        return self.max_stack

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<{type(self).__name__} {self.name!r} x{self.stack}>"


@dataclass(eq=False, repr=False)
class WorldObject(Item):
    """An object that can be placed on a map tile.

    Attributes:
        is_spawned_object: Set by the simulation for objects it placed itself.
        forage: Whether the object's category makes it forage anywhere.
        minutes_until_ready: Production countdown; ``<= 0`` means finished.
        held_object: Output slot for machines, None when empty.
    """

    kind: ItemKind = field(default=ItemKind.OBJECT, init=False)
    max_stack: int = 999
    is_spawned_object: bool = False
    forage: bool = False
    minutes_until_ready: int = 0
    held_object: Optional[Item] = None

    def is_forage(self, location: Optional["Location"]) -> bool:
        if self.forage:
            return True
        # Anything lying on the beach counts as forage.
        return location is not None and location.everything_is_forage


@dataclass(eq=False, repr=False)
class Chest(WorldObject):
    kind: ItemKind = field(default=ItemKind.CHEST, init=False)
    max_stack: int = 1
    player_chest: bool = True
    items: List[Optional[Item]] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class Cask(WorldObject):
    """Aging machine whose output can be taken out at any time."""

    kind: ItemKind = field(default=ItemKind.CASK, init=False)
    max_stack: int = 1


@dataclass(eq=False, repr=False)
class Furniture(Item):
    """Decoration. Tables and similar pieces can hold one item on top."""

    kind: ItemKind = field(default=ItemKind.FURNITURE, init=False)
    minutes_until_ready: int = 0
    held_object: Optional[Item] = None


@dataclass(eq=False, repr=False)
class StorageFurniture(Furniture):
    kind: ItemKind = field(default=ItemKind.STORAGE_FURNITURE, init=False)
    held_items: List[Optional[Item]] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class Hat(Item):
    kind: ItemKind = field(default=ItemKind.HAT, init=False)


@dataclass(eq=False, repr=False)
class Ring(Item):
    kind: ItemKind = field(default=ItemKind.RING, init=False)


@dataclass(eq=False, repr=False)
class Boots(Item):
    kind: ItemKind = field(default=ItemKind.BOOTS, init=False)


@dataclass(eq=False, repr=False)
class Clothing(Item):
    kind: ItemKind = field(default=ItemKind.CLOTHING, init=False)


@dataclass(eq=False)
class Storage:
    """Plain item list with no item identity of its own (fridge, mill output)."""

    items: List[Optional[Item]] = field(default_factory=list)


@dataclass(eq=False)
class Character:
    name: str
    kind: CharacterKind = CharacterKind.VILLAGER
    hat: Optional[Item] = None


@dataclass(eq=False)
class Building:
    kind: BuildingKind
    output: Optional[Storage] = None


@dataclass(eq=False)
class Location:
    """A map in the world and everything placed in it."""

    name: str
    kind: LocationKind = LocationKind.OUTDOORS
    decoratable: bool = False
    buildable: bool = False
    everything_is_forage: bool = False
    furniture: List[Item] = field(default_factory=list)
    fridge: Optional[Storage] = None
    characters: List[Character] = field(default_factory=list)
    buildings: List[Building] = field(default_factory=list)
    objects: Dict[Tuple[int, int], WorldObject] = field(default_factory=dict)


@dataclass(eq=False)
class Player:
    name: str = "Farmer"
    items: List[Optional[Item]] = field(default_factory=list)
    shirt_item: Optional[Item] = None
    pants_item: Optional[Item] = None
    boots: Optional[Item] = None
    hat: Optional[Item] = None
    left_ring: Optional[Item] = None
    right_ring: Optional[Item] = None


@dataclass(eq=False)
class Farm:
    pieces_of_hay: int = 0


__all__ = [
    "Item",
    "WorldObject",
    "Chest",
    "Cask",
    "Furniture",
    "StorageFurniture",
    "Hat",
    "Ring",
    "Boots",
    "Clothing",
    "Storage",
    "Character",
    "Building",
    "Location",
    "Player",
    "Farm",
]
