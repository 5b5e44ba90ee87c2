"""Small hand-built worlds for unit tests."""
from shrunk.core.item import Item
from shrunk.core.room import ExitBlocker, Room
from shrunk.core.world import World


def make_world() -> World:
    """Three rooms in a row plus a one-way closet.

    Porch <-> Hall <-> Study, Hall -> Closet. The study can only be left
    with the key.
    """
    rooms = [
        Room(
            name="Porch",
            brief_description="The porch again.",
            long_description="A creaky porch.",
            exits=["Hall"],
            items={
                "pebble": Item(name="pebble", description="A smooth pebble."),
                "boulder": Item(name="boulder", description="A boulder.", too_big=True),
                "swing": Item(name="swing", description="A porch swing.", is_feature=True),
            },
        ),
        Room(
            name="Hall",
            alias="^(Corridor|Hallway)$",
            brief_description="The hall again.",
            long_description="A long hall with a cupboard.",
            exits=["Porch", "Study", "Closet", "Nowhere"],
            items={
                "cupboard": Item(
                    name="cupboard",
                    description="A cupboard with the door ajar.",
                    is_feature=True,
                    contains_hidden_object=True,
                    hidden_object="key",
                    discovery_statement="Inside the cupboard hangs a key.",
                ),
                "key": Item(name="key", description="A brass key.", discovered=False),
                "stool": Item(name="stool", description="A step stool.", is_feature=True),
            },
        ),
        Room(
            name="Study",
            brief_description="The study again.",
            long_description="A quiet study.",
            exits=["Hall"],
            exit_blocker=ExitBlocker(item="key", reason="the door has locked behind you"),
            items={
                "apple": Item(name="apple", description="A red apple.", is_edible=True),
            },
        ),
        Room(
            name="Closet",
            brief_description="The closet again.",
            long_description="A cramped closet. The door has no handle on this side.",
        ),
    ]
    return World(rooms={room.name: room for room in rooms}, current_room_id="Porch")


def all_items(world: World) -> list[str]:
    """Every item name in every container, duplicates included."""
    names = list(world.inventory)
    for room in world.rooms.values():
        names.extend(room.items)
    return names
