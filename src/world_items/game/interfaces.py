from __future__ import annotations

from typing import Iterable, Mapping, Optional, Protocol, Sequence, Tuple

from .kinds import BuildingKind, CharacterKind, ItemKind, LocationKind


class ItemProtocol(Protocol):
    """Shape every scanned item must expose.

    The scanner reads ``kind`` to decide which of the richer protocols below
    an item also implements; it never relies on the concrete class.
    """

    name: str
    item_id: str
    kind: ItemKind
    stack: int

    def maximum_stack_size(self) -> int:
        """Return how many of this item fit in a single stack."""


class HeldSlotProtocol(ItemProtocol, Protocol):
    """Item with a single held-object slot (machines, tables)."""

    minutes_until_ready: int
    held_object: Optional[ItemProtocol]


class WorldObjectProtocol(HeldSlotProtocol, Protocol):
    """Placeable object (``ItemKind.OBJECT``, ``CHEST`` or ``CASK``)."""

    is_spawned_object: bool

    def is_forage(self, location: Optional["LocationProtocol"]) -> bool:
        """Return True if the object counts as forage.

        Args:
            location: Where the object sits, or None when unknown.
        """


class StorageProtocol(Protocol):
    """Anything with a flat list of items (chests, fridges, building output)."""

    items: Sequence[Optional[ItemProtocol]]


class ChestProtocol(WorldObjectProtocol, StorageProtocol, Protocol):
    player_chest: bool


class StorageFurnitureProtocol(HeldSlotProtocol, Protocol):
    held_items: Sequence[Optional[ItemProtocol]]


class CharacterProtocol(Protocol):
    name: str
    kind: CharacterKind
    hat: Optional[ItemProtocol]


class BuildingProtocol(Protocol):
    kind: BuildingKind
    output: Optional[StorageProtocol]


class LocationProtocol(Protocol):
    name: str
    kind: LocationKind
    decoratable: bool
    buildable: bool
    everything_is_forage: bool
    furniture: Sequence[ItemProtocol]
    fridge: Optional[StorageProtocol]
    characters: Sequence[CharacterProtocol]
    buildings: Sequence[BuildingProtocol]
    objects: Mapping[Tuple[int, int], WorldObjectProtocol]


class PlayerProtocol(Protocol):
    """The current player's carried items and six equipment slots."""

    items: Sequence[Optional[ItemProtocol]]
    shirt_item: Optional[ItemProtocol]
    pants_item: Optional[ItemProtocol]
    boots: Optional[ItemProtocol]
    hat: Optional[ItemProtocol]
    left_ring: Optional[ItemProtocol]
    right_ring: Optional[ItemProtocol]


class FarmProtocol(Protocol):
    pieces_of_hay: int


class LocationProvider(Protocol):
    def get_locations(self) -> Iterable[LocationProtocol]:
        """Return every active location."""


class PlayerProvider(Protocol):
    def get_player(self) -> PlayerProtocol:
        """Return the current player."""


class FarmProvider(Protocol):
    def get_farm(self) -> Optional[FarmProtocol]:
        """Return the active farm, or None when no farm is loaded."""


class ItemFactory(Protocol):
    def create_object(self, item_id: str, stack: int = 1) -> ItemProtocol:
        """Create a fresh item instance.

        Raises:
            UnknownItemError: If ``item_id`` is not a known item.
        """


__all__ = [
    "ItemProtocol",
    "HeldSlotProtocol",
    "WorldObjectProtocol",
    "StorageProtocol",
    "ChestProtocol",
    "StorageFurnitureProtocol",
    "CharacterProtocol",
    "BuildingProtocol",
    "LocationProtocol",
    "PlayerProtocol",
    "FarmProtocol",
    "LocationProvider",
    "PlayerProvider",
    "FarmProvider",
    "ItemFactory",
]
