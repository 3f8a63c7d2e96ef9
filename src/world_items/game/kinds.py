from __future__ import annotations

from enum import Enum


class ItemKind(str, Enum):
    """Closed set of item kinds the scanner knows how to look inside."""

    ITEM = "item"
    OBJECT = "object"
    CHEST = "chest"
    CASK = "cask"
    FURNITURE = "furniture"
    STORAGE_FURNITURE = "storage_furniture"
    HAT = "hat"
    RING = "ring"
    BOOTS = "boots"
    CLOTHING = "clothing"

    @property
    def is_world_object(self) -> bool:
        """Placeable objects: plain objects, chests and casks."""
        return self in _WORLD_OBJECT_KINDS

    @property
    def has_held_slot(self) -> bool:
        """Kinds with a held-object slot: world objects and furniture (a table can hold an item)."""
        return self in _HELD_SLOT_KINDS


_WORLD_OBJECT_KINDS = frozenset({ItemKind.OBJECT, ItemKind.CHEST, ItemKind.CASK})
_HELD_SLOT_KINDS = _WORLD_OBJECT_KINDS | {ItemKind.FURNITURE, ItemKind.STORAGE_FURNITURE}


class LocationKind(str, Enum):
    OUTDOORS = "outdoors"
    FARM = "farm"
    FARMHOUSE = "farmhouse"
    BEACH = "beach"
    INTERIOR = "interior"


class CharacterKind(str, Enum):
    VILLAGER = "villager"
    CHILD = "child"
    HORSE = "horse"
    PET = "pet"
    MONSTER = "monster"

    @property
    def can_wear_hat(self) -> bool:
        return self in (CharacterKind.CHILD, CharacterKind.HORSE)


class BuildingKind(str, Enum):
    MILL = "mill"
    JUNIMO_HUT = "junimo_hut"
    BARN = "barn"
    COOP = "coop"
    SILO = "silo"
    SHED = "shed"

    @property
    def has_output(self) -> bool:
        return self in (BuildingKind.MILL, BuildingKind.JUNIMO_HUT)


__all__ = ["ItemKind", "LocationKind", "CharacterKind", "BuildingKind"]
