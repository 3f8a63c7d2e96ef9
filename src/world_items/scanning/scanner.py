from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, cast

from ..config import ScanConfig
from ..game.interfaces import (
    ChestProtocol,
    FarmProvider,
    HeldSlotProtocol,
    ItemFactory,
    ItemProtocol,
    LocationProtocol,
    LocationProvider,
    PlayerProvider,
    StorageFurnitureProtocol,
    WorldObjectProtocol,
)
from ..game.kinds import ItemKind, LocationKind
from .found_item import FoundItem

logger = logging.getLogger(__name__)


class WorldItemScanner:
    """Scans the game world for items owned by the player.

    Compared to a plain walk over every item in the world, the scan:
    - skips items held by other characters, items lying loose on the ground,
      spawned forage and clutter, and output of machines that aren't ready
      (except casks, which can be emptied any time);
    - looks inside nested storage (a chest held in a chest, a dresser's
      contents, a machine's output);
    - adds the hay stored in silos, which the farm only tracks as a count.

    The scanner is read-only and keeps no state between calls.
    """

    def __init__(
        self,
        locations: LocationProvider,
        player: PlayerProvider,
        farm: FarmProvider,
        item_factory: ItemFactory,
        config: Optional[ScanConfig] = None,
    ) -> None:
        self.locations = locations
        self.player = player
        self.farm = farm
        self.item_factory = item_factory
        self.config = config or ScanConfig()

    def get_all_owned_items(self) -> List[FoundItem]:
        """Get all items owned by the player."""
        items: List[FoundItem] = []
        logger.info("Scanning world for owned items")

        # in locations
        for location in self.locations.get_locations():
            before = len(items)
            self._scan_and_track(items, self._get_location_roots(location))
            logger.debug("Location %s: %d item(s)", location.name, len(items) - before)

        # inventory
        player = self.player.get_player()
        self._scan_and_track(items, player.items, is_in_inventory=True)
        self._scan_and_track(
            items,
            [
                player.shirt_item,
                player.pants_item,
                player.boots,
                player.hat,
                player.left_ring,
                player.right_ring,
            ],
            is_in_inventory=True,
        )

        # hay in silos
        self._scan_and_track(items, self.get_hay_stacks())

        logger.info(
            "Found %d owned item(s), %d in inventory",
            len(items),
            sum(1 for found in items if found.is_in_inventory),
        )
        return items

    def get_hay_stacks(self) -> Iterator[ItemProtocol]:
        """Create hay items matching the farm's silo count, split into full stacks."""
        farm = self.farm.get_farm()
        hay_count = farm.pieces_of_hay if farm is not None else 0
        while hay_count > 0:
            hay = self.item_factory.create_object(self.config.hay_item_id, 1)
            hay.stack = min(hay_count, hay.maximum_stack_size())
            hay_count -= hay.stack
            yield hay

    def is_spawned_world_item(self, item: ItemProtocol) -> bool:
        """Get whether an item was spawned automatically.

        This is heuristic and only applies to items placed in the world, not
        items in an inventory.
        """
        if not item.kind.is_world_object:
            return False
        obj = cast(WorldObjectProtocol, item)
        return (
            obj.is_spawned_object
            # the location is only used to treat everything on the beach as forage
            or obj.is_forage(None)
            or (obj.kind != ItemKind.CHEST and obj.name in self.config.clutter_names)
        )

    def scan(self, root: Optional[ItemProtocol], is_in_inventory: bool = False) -> Iterator[FoundItem]:
        """Recursively find all items contained within a root item, including the root itself.

        Args:
            root: The root item to search. None yields nothing.
            is_in_inventory: Whether the root is in the current player's inventory.
        """
        if root is None:
            return

        yield FoundItem(root, is_in_inventory)

        for child in self.get_direct_contents(root):
            yield from self.scan(child, is_in_inventory)

    def get_direct_contents(self, root: ItemProtocol) -> Iterator[Optional[ItemProtocol]]:
        """Get the items directly held by an item. Not recursive; may yield None."""
        # held object
        if root.kind.has_held_slot:
            holder = cast(HeldSlotProtocol, root)
            if holder.minutes_until_ready <= 0 or holder.kind == ItemKind.CASK:
                yield holder.held_object

        # inventories
        if root.kind == ItemKind.STORAGE_FURNITURE:
            yield from cast(StorageFurnitureProtocol, root).held_items
        elif root.kind == ItemKind.CHEST:
            chest = cast(ChestProtocol, root)
            if chest.player_chest:
                yield from chest.items

    def _get_location_roots(self, location: LocationProtocol) -> Iterator[Optional[ItemProtocol]]:
        # furniture
        if location.decoratable:
            yield from location.furniture

        # farmhouse fridge
        if location.kind == LocationKind.FARMHOUSE and location.fridge is not None:
            yield from location.fridge.items

        # character hats
        for character in location.characters:
            if character.kind.can_wear_hat:
                yield character.hat

        # building output
        if location.buildable:
            for building in location.buildings:
                if building.kind.has_output and building.output is not None:
                    yield from building.output.items

        # map objects
        for tile, obj in location.objects.items():
            if obj.kind == ItemKind.CHEST or not self.is_spawned_world_item(obj):
                yield obj
            else:
                logger.debug("Skipping spawned %s at %s in %s", obj.name, tile, location.name)

    def _scan_and_track(
        self,
        tracked: List[FoundItem],
        roots: Iterable[Optional[ItemProtocol]],
        is_in_inventory: bool = False,
    ) -> None:
        for root in roots:
            tracked.extend(self.scan(root, is_in_inventory))


__all__ = ["WorldItemScanner"]
