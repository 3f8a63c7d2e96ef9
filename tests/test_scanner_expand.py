from world_items.game.models import Cask, Chest, Furniture, Item, StorageFurniture, WorldObject
from world_items.scanning import FoundItem


def test_scan_none_yields_nothing(scanner):
    assert list(scanner.scan(None)) == []
    assert list(scanner.scan(None, is_in_inventory=True)) == []


def test_scan_leaf_yields_root_only(scanner):
    parsnip = WorldObject(name="Parsnip", item_id="24", stack=5)

    world_found = list(scanner.scan(parsnip))
    inv_found = list(scanner.scan(parsnip, is_in_inventory=True))

    assert world_found == [FoundItem(parsnip, False)]
    assert inv_found == [FoundItem(parsnip, True)]


def test_scan_nested_containers_depth_first_with_root_flag(scanner):
    gem = WorldObject(name="Amethyst")
    dresser = StorageFurniture(name="Dresser", held_items=[gem])
    inner = Chest(name="Chest", items=[dresser])
    outer = Chest(name="Big Chest", items=[inner, WorldObject(name="Wood", stack=50)])

    found = list(scanner.scan(outer, is_in_inventory=True))

    assert [f.item.name for f in found] == ["Big Chest", "Chest", "Dresser", "Amethyst", "Wood"]
    assert all(f.is_in_inventory for f in found)


def test_scan_is_lazy(scanner):
    chest = Chest(name="Chest", items=[WorldObject(name="Stone")])

    gen = scanner.scan(chest)
    first = next(gen)

    assert first.item is chest
    assert next(gen).item.name == "Stone"


def test_null_entries_in_storage_are_skipped(scanner):
    chest = Chest(name="Chest", items=[None, WorldObject(name="Clay"), None])

    names = [f.item.name for f in scanner.scan(chest)]

    assert names == ["Chest", "Clay"]


class TestDirectContents:
    def test_ready_machine_output_included(self, scanner):
        jelly = WorldObject(name="Blueberry Jelly")
        keg = WorldObject(name="Preserves Jar", minutes_until_ready=0, held_object=jelly)

        assert list(scanner.get_direct_contents(keg)) == [jelly]

    def test_overdue_countdown_counts_as_ready(self, scanner):
        wine = WorldObject(name="Wine")
        keg = WorldObject(name="Keg", minutes_until_ready=-30, held_object=wine)

        assert list(scanner.get_direct_contents(keg)) == [wine]

    def test_unready_machine_output_excluded(self, scanner):
        keg = WorldObject(name="Keg", minutes_until_ready=120, held_object=WorldObject(name="Beer"))

        assert list(scanner.get_direct_contents(keg)) == []
        assert [f.item.name for f in scanner.scan(keg)] == ["Keg"]

    def test_cask_output_available_any_time(self, scanner):
        wine = WorldObject(name="Wine")
        cask = Cask(name="Cask", minutes_until_ready=5000, held_object=wine)

        assert list(scanner.get_direct_contents(cask)) == [wine]

    def test_empty_ready_machine_yields_null_and_scan_drops_it(self, scanner):
        furnace = WorldObject(name="Furnace", minutes_until_ready=0, held_object=None)

        assert list(scanner.get_direct_contents(furnace)) == [None]
        assert len(list(scanner.scan(furnace))) == 1

    def test_locked_chest_contents_not_included(self, scanner):
        fixture = Chest(name="Chest", player_chest=False, items=[WorldObject(name="Prize")])

        assert list(scanner.get_direct_contents(fixture)) == [None]
        assert [f.item.name for f in scanner.scan(fixture)] == ["Chest"]

    def test_storage_furniture_held_items(self, scanner):
        shirt = Item(name="Shirt")
        dresser = StorageFurniture(name="Dresser", held_items=[shirt, None])

        # empty held slot first, then the drawer contents
        assert list(scanner.get_direct_contents(dresser)) == [None, shirt, None]

    def test_item_on_table_included(self, scanner):
        diamond = WorldObject(name="Diamond")
        table = Furniture(name="Oak Table", held_object=diamond)

        assert list(scanner.get_direct_contents(table)) == [diamond]
        assert [f.item.name for f in scanner.scan(table)] == ["Oak Table", "Diamond"]

    def test_item_on_dresser_and_in_drawers(self, scanner):
        lamp = Furniture(name="Lamp")
        sock = Item(name="Sock")
        dresser = StorageFurniture(name="Dresser", held_object=lamp, held_items=[sock])

        assert [f.item for f in scanner.scan(dresser)] == [dresser, lamp, sock]

    def test_furniture_with_pending_countdown_hides_held_object(self, scanner):
        table = Furniture(name="Oak Table", minutes_until_ready=10, held_object=WorldObject(name="Diamond"))

        assert list(scanner.get_direct_contents(table)) == []

    def test_empty_furniture_and_plain_items_have_no_contents(self, scanner):
        assert [f.item.name for f in scanner.scan(Furniture(name="Oak Chair"))] == ["Oak Chair"]
        assert list(scanner.get_direct_contents(Item(name="Galaxy Sword"))) == []
