from __future__ import annotations

import dataclasses
import json
import logging
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, cast

import yaml
from jsonschema import Draft202012Validator

from .exceptions import SnapshotError
from .game.kinds import BuildingKind, CharacterKind, ItemKind, LocationKind
from .game.models import Building, Character, Farm, Item, Location, Player, Storage, WorldObject
from .game.world import MODEL_TYPES, ItemDefinition, World

logger = logging.getLogger(__name__)

_SCHEMA_PKG = "world_items.data.schemas"
_SCHEMA_FILE = "world.schema.json"

_EQUIPMENT_SLOTS = ("shirt_item", "pants_item", "boots", "hat", "left_ring", "right_ring")
_NESTED_ITEM_FIELDS = ("held_object",)
_NESTED_LIST_FIELDS = ("items", "held_items")


@lru_cache(maxsize=1)
def _load_world_schema() -> Dict[str, Any]:
    """Load the bundled world snapshot schema. Cached since the schema is static."""
    with resources.files(_SCHEMA_PKG).joinpath(_SCHEMA_FILE).open("rb") as fh:
        logger.debug("Loading world schema from %s/%s", _SCHEMA_PKG, _SCHEMA_FILE)
        return json.load(fh)


def validate_snapshot(data: Any) -> None:
    """
    Validate raw snapshot data against the world JSON schema.

    Raises:
        SnapshotError carrying every validation error found.
    """
    validator = Draft202012Validator(_load_world_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.error("Snapshot validation error at %s: %s", list(err.path), err.message)
        raise SnapshotError("World snapshot failed schema validation", errors)


def _build_item(data: Dict[str, Any], default_kind: ItemKind = ItemKind.OBJECT) -> Item:
    kind = ItemKind(data.get("kind", default_kind.value))
    model = MODEL_TYPES[kind]
    accepted = {f.name for f in dataclasses.fields(model) if f.init}

    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        if key == "kind":
            continue
        if key not in accepted:
            raise SnapshotError(f"Item {data['name']!r} of kind '{kind.value}' has no field '{key}'")
        if key in _NESTED_ITEM_FIELDS:
            value = _build_optional_item(value)
        elif key in _NESTED_LIST_FIELDS:
            value = _build_item_list(value)
        kwargs[key] = value
    return model(**kwargs)


def _build_optional_item(data: Optional[Dict[str, Any]], default_kind: ItemKind = ItemKind.OBJECT) -> Optional[Item]:
    if data is None:
        return None
    return _build_item(data, default_kind)


def _build_item_list(entries: Optional[List[Any]]) -> List[Optional[Item]]:
    return [_build_optional_item(entry) for entry in entries or []]


def _build_location(data: Dict[str, Any]) -> Location:
    name = data["name"]
    location = Location(
        name=name,
        kind=LocationKind(data.get("kind", LocationKind.OUTDOORS.value)),
        decoratable=bool(data.get("decoratable", False)),
        buildable=bool(data.get("buildable", False)),
        everything_is_forage=bool(data.get("everything_is_forage", False)),
        furniture=[_build_item(f, ItemKind.FURNITURE) for f in data.get("furniture", [])],
        fridge=Storage(_build_item_list(data["fridge"])) if "fridge" in data else None,
        characters=[
            Character(
                name=c["name"],
                kind=CharacterKind(c.get("kind", CharacterKind.VILLAGER.value)),
                hat=_build_optional_item(c.get("hat"), ItemKind.HAT),
            )
            for c in data.get("characters", [])
        ],
        buildings=[
            Building(
                kind=BuildingKind(b["kind"]),
                output=Storage(_build_item_list(b["output"])) if "output" in b else None,
            )
            for b in data.get("buildings", [])
        ],
    )

    for entry in data.get("objects", []):
        tile = (int(entry["tile"][0]), int(entry["tile"][1]))
        obj = _build_item(entry["item"])
        if not obj.kind.is_world_object:
            raise SnapshotError(f"{name}: {obj.name!r} at {tile} is a '{obj.kind.value}', not a placeable object")
        if tile in location.objects:
            raise SnapshotError(f"{name}: more than one object at tile {tile}")
        location.objects[tile] = cast(WorldObject, obj)
    return location


def _build_player(data: Dict[str, Any]) -> Player:
    player = Player(
        name=data.get("name", "Farmer"),
        items=_build_item_list(data.get("items")),
    )
    for slot in _EQUIPMENT_SLOTS:
        setattr(player, slot, _build_optional_item(data.get(slot), ItemKind.ITEM))
    return player


def build_world(data: Dict[str, Any]) -> World:
    """Validate raw snapshot data and build a :class:`World` from it."""
    validate_snapshot(data)
    world = World(
        locations=[_build_location(loc) for loc in data.get("locations", [])],
        player=_build_player(data.get("player") or {}),
        farm=Farm(**data["farm"]) if data.get("farm") is not None else None,
    )
    for entry in data.get("catalog", []):
        world.catalog.register(
            ItemDefinition(
                item_id=entry["item_id"],
                name=entry["name"],
                kind=ItemKind(entry.get("kind", ItemKind.OBJECT.value)),
                max_stack=int(entry.get("max_stack", 999)),
            )
        )
    logger.info(
        "Built world with %d location(s), %d inventory slot(s), farm=%s",
        len(world.locations),
        len(world.player.items),
        "yes" if world.farm is not None else "no",
    )
    return world


def load_world(path: os.PathLike | str) -> World:
    """Load a YAML world snapshot from disk.

    Raises:
        SnapshotError: if the file is missing or unreadable, not valid YAML, or
            fails validation.
    """
    abs_path = Path(path).resolve()
    logger.debug("Loading world snapshot: %s", abs_path)
    try:
        with abs_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise SnapshotError(f"Snapshot file not found: {abs_path}") from exc
    except yaml.YAMLError as exc:
        raise SnapshotError(f"Invalid YAML in {abs_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SnapshotError(f"Snapshot {abs_path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {abs_path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot {abs_path} must be a mapping, got {type(data).__name__}")
    return build_world(data)


__all__ = ["build_world", "load_world", "validate_snapshot"]
