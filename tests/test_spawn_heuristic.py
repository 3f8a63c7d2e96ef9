import pytest

from world_items.config import ScanConfig
from world_items.game.kinds import LocationKind
from world_items.game.models import Chest, Furniture, Item, Location, WorldObject
from world_items.game.world import World
from world_items.scanning import WorldItemScanner


def test_spawned_object_is_excluded(scanner):
    assert scanner.is_spawned_world_item(WorldObject(name="Salmonberry", is_spawned_object=True)) is True


def test_forage_object_is_excluded(scanner):
    assert scanner.is_spawned_world_item(WorldObject(name="Leek", forage=True)) is True


@pytest.mark.parametrize("name", ["Weeds", "Stone", "Twig"])
def test_clutter_names_are_excluded(scanner, name):
    assert scanner.is_spawned_world_item(WorldObject(name=name)) is True


def test_clutter_name_on_chest_is_not_excluded(scanner):
    assert scanner.is_spawned_world_item(Chest(name="Stone")) is False


def test_regular_placed_object_is_kept(scanner):
    assert scanner.is_spawned_world_item(WorldObject(name="Keg")) is False


def test_non_objects_never_count_as_spawned(scanner):
    assert scanner.is_spawned_world_item(Furniture(name="Weeds")) is False
    assert scanner.is_spawned_world_item(Item(name="Stone")) is False


def test_forage_check_never_receives_location():
    calls = []

    class RecordingObject(WorldObject):
        def is_forage(self, location):
            calls.append(location)
            return super().is_forage(location)

    beach = Location(name="Beach", kind=LocationKind.BEACH, everything_is_forage=True)
    shell = RecordingObject(name="Keg")
    beach.objects[(3, 4)] = shell
    world = World(locations=[beach])
    scanner = WorldItemScanner(world, world, world, world)

    found = scanner.get_all_owned_items()

    # the beach would make everything forage, but no location is passed
    assert calls == [None]
    assert [f.item for f in found] == [shell]


def test_custom_clutter_names():
    world = World()
    scanner = WorldItemScanner(world, world, world, world, config=ScanConfig(clutter_names=frozenset({"Fiber"})))

    assert scanner.is_spawned_world_item(WorldObject(name="Fiber")) is True
    assert scanner.is_spawned_world_item(WorldObject(name="Weeds")) is False
