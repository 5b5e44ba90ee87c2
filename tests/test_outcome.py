import unittest
from itertools import combinations

from shrunk import config
from shrunk.core.item import Item
from shrunk.core.outcome import check_arrival, give_up, have_all_items, missing_items
from shrunk.core.room import Room
from shrunk.core.world import World
from shrunk.messages import GameOverMessage


def workshop_world(inventory: list[str]) -> World:
    rooms = {
        "Hall": Room(name="Hall", brief_description="", long_description="", exits=[config.TERMINAL_ROOM]),
        config.TERMINAL_ROOM: Room(
            name=config.TERMINAL_ROOM, brief_description="", long_description="", exits=["Hall"]
        ),
    }
    return World(
        rooms=rooms,
        current_room_id=config.TERMINAL_ROOM,
        inventory={name: Item(name=name, description="") for name in inventory},
    )


class TestHaveAllItems(unittest.TestCase):
    required = sorted(config.REQUIRED_ITEMS)

    def test_empty_inventory(self):
        self.assertFalse(have_all_items([]))

    def test_exact_set(self):
        self.assertTrue(have_all_items(self.required))

    def test_superset(self):
        self.assertTrue(have_all_items(self.required + ["cookie", "scarf"]))

    def test_every_proper_subset_fails(self):
        for size in range(len(self.required)):
            for subset in combinations(self.required, size):
                self.assertFalse(have_all_items(subset), subset)

    def test_custom_requirement(self):
        self.assertTrue(have_all_items({"a": 1, "b": 2}, required={"a"}))
        self.assertTrue(have_all_items([], required=set()))

    def test_missing_items_sorted(self):
        self.assertEqual(missing_items(["battery"]), sorted(config.REQUIRED_ITEMS - {"battery"}))


class TestArrival(unittest.TestCase):
    def test_win_with_everything(self):
        world = workshop_world(sorted(config.REQUIRED_ITEMS))
        messages = check_arrival(world)
        self.assertEqual(world.status, "won")
        self.assertIsInstance(messages[0], GameOverMessage)
        self.assertEqual(messages[0].outcome, "won")

    def test_not_terminal_without_everything(self):
        world = workshop_world(["shrink ray"])
        messages = check_arrival(world)
        self.assertEqual(world.status, "ongoing")
        self.assertIn("battery", messages[0].content)

    def test_other_rooms_are_ignored(self):
        world = workshop_world(sorted(config.REQUIRED_ITEMS))
        world.current_room_id = "Hall"
        self.assertEqual(check_arrival(world), [])
        self.assertEqual(world.status, "ongoing")


class TestGiveUp(unittest.TestCase):
    def test_lose_without_everything(self):
        world = workshop_world([])
        messages = give_up(world)
        self.assertEqual(world.status, "lost")
        self.assertEqual(messages[0].outcome, "lost")

    def test_no_loss_with_everything(self):
        world = workshop_world(sorted(config.REQUIRED_ITEMS))
        messages = give_up(world)
        self.assertEqual(world.status, "ongoing")
        self.assertIn(config.TERMINAL_ROOM, messages[0].content)


if __name__ == "__main__":
    unittest.main()
