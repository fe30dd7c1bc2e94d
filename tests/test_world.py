import os
import tempfile
import unittest

import yaml

from loremud.world import DEFAULT_WORLD_PATH, Item, World, WorldDataError, load_world

# 1. MOCK DATA (The "Map")
WORLD_DATA = {
    "title": "Test Manor",
    "start_room": "hall",
    "rooms": [
        {
            "id": "hall",
            "name": "Hall",
            "description": "A dusty hall.",
            "items": [{"id": "sword", "name": "sword"}, "lamp"],
            "exits": {"forward": "library"}
        },
        {"id": "library", "description": "Rows of books."}
    ]
}


class TestWorld(unittest.TestCase):
    def setUp(self):
        self.world = World(WORLD_DATA)

    def test_rooms_are_indexed_by_id(self):
        self.assertEqual(sorted(self.world.rooms), ["hall", "library"])
        self.assertEqual(self.world.get_room("hall").description, "A dusty hall.")
        self.assertEqual(self.world.start_room, "hall")
        self.assertEqual(self.world.title, "Test Manor")
        self.assertEqual(self.world.get_room("library").description, "Rows of books.")

    def test_unknown_room_is_none(self):
        self.assertIsNone(self.world.get_room("cellar"))
        self.assertIsNone(self.world.get_room(None))

    def test_exits_hold_room_ids(self):
        hall = self.world.get_room("hall")
        self.assertEqual(hall.get_exit("forward"), "library")
        self.assertIsNone(hall.get_exit("left"))

    def test_item_lookup_ignores_case(self):
        hall = self.world.get_room("hall")
        self.assertIs(hall.get_item("SWORD"), hall.items[0])
        self.assertIsNone(hall.get_item("axe"))

    def test_bare_string_item(self):
        hall = self.world.get_room("hall")
        self.assertEqual(hall.item_names(), ["sword", "lamp"])
        self.assertEqual(hall.get_item("lamp").id, "lamp")

    def test_remove_item(self):
        hall = self.world.get_room("hall")
        sword = hall.get_item("sword")
        hall.remove_item(sword)
        self.assertEqual(hall.item_names(), ["lamp"])
        self.assertIsNone(hall.get_item("sword"))

    def test_start_room_defaults_to_first_room(self):
        data = dict(WORLD_DATA)
        del data["start_room"]
        self.assertEqual(World(data).start_room, "hall")

    def test_exit_to_unknown_room_is_rejected(self):
        data = {"rooms": [{"id": "hall", "exits": {"back": "nowhere"}}]}
        with self.assertRaises(WorldDataError):
            World(data)

    def test_unknown_start_room_is_rejected(self):
        data = {"start_room": "attic", "rooms": [{"id": "hall"}]}
        with self.assertRaises(WorldDataError):
            World(data)

    def test_empty_world(self):
        world = World({})
        self.assertEqual(world.rooms, {})
        self.assertIsNone(world.start_room)

    def test_malformed_shapes_are_rejected(self):
        bad_worlds = [
            ["not", "a", "mapping"],
            {"rooms": {"hall": {"description": "A dusty hall."}}},
            {"rooms": [{"description": "no id"}]},
            {"rooms": ["hall"]},
            {"rooms": [{"id": "hall", "items": [1984]}]},
            {"rooms": [{"id": "hall", "items": [{"name": "nameless"}]}]},
            {"rooms": [{"id": "hall", "items": "sword"}]},
            {"rooms": [{"id": "hall", "exits": ["forward"]}]},
            {"rooms": [{"id": "hall"}, {"id": "hall"}]},
        ]
        for data in bad_worlds:
            with self.assertRaises(WorldDataError, msg=repr(data)):
                World(data)

    def test_error_names_the_item_at_fault(self):
        with self.assertRaises(WorldDataError) as ctx:
            World({"rooms": [{"id": "hall", "items": [1984]}]})
        self.assertIn("1984", str(ctx.exception))
        self.assertIn("hall", str(ctx.exception))

    def test_scalar_ids_and_names_become_strings(self):
        world = World({
            "start_room": 1,
            "rooms": [
                {"id": 1, "items": [{"id": 7, "name": 1984}], "exits": {"forward": 2}},
                {"id": 2}
            ]
        })
        self.assertEqual(world.start_room, "1")
        self.assertEqual(world.get_room("1").get_exit("forward"), "2")
        self.assertEqual(world.get_room("1").item_names(), ["1984"])
        self.assertEqual(world.get_room("2").description, "")


class TestItem(unittest.TestCase):
    def test_name_defaults_to_id(self):
        self.assertEqual(Item("rope").name, "rope")
        self.assertTrue(Item("old_map", "Old Map").match_name("old map"))


class TestLoadWorld(unittest.TestCase):
    def test_bundled_world_loads(self):
        world = load_world(DEFAULT_WORLD_PATH)
        self.assertIn(world.start_room, world.rooms)
        for room in world.rooms.values():
            for target in room.exits.values():
                self.assertIn(target, world.rooms)

    def test_load_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "world.yaml")
            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(WORLD_DATA, f)
            world = load_world(path)
        self.assertEqual(world.get_room("hall").item_names(), ["sword", "lamp"])

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_world("/nonexistent/world.yaml")


if __name__ == '__main__':
    unittest.main()
