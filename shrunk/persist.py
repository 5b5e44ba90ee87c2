from pathlib import Path

from devtools import debug
from pydantic import ValidationError

from . import config
from .core.errors import WorldLoadError
from .core.room import Room
from .core.world import World


def load_rooms(directory: str | Path = config.ROOMS_DIR) -> dict[str, Room]:
    """
    Read every room definition in a directory.

    Each ``*.json`` file holds one room. Exits are not checked here, a
    dangling exit only shows up when the player tries to use it.

    Args:
        directory: Directory containing the room files

    Returns:
        Rooms indexed by name

    Raises:
        WorldLoadError: the definitions are unreadable or incomplete
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise WorldLoadError(f"Rooms directory '{directory}' not found")
    try:
        files = sorted(directory.glob("*.json"))
    except OSError as e:
        raise WorldLoadError(f"Cannot read rooms from '{directory}': {e}") from e

    rooms: dict[str, Room] = {}
    for path in files:
        try:
            room = Room.model_validate_json(path.read_text())
        except (OSError, ValidationError) as e:
            raise WorldLoadError(f"Bad room definition in '{path.name}': {e}") from e
        if room.name in rooms:
            raise WorldLoadError(f"Room '{room.name}' is defined twice ('{path.name}')")
        rooms[room.name] = room

    if len(rooms) < config.MIN_ROOMS:
        raise WorldLoadError(f"The game must have at least {config.MIN_ROOMS} rooms, found {len(rooms)}")

    item_count = sum(len(room.items) for room in rooms.values())
    if item_count < config.MIN_ITEMS:
        raise WorldLoadError(f"The game must have at least {config.MIN_ITEMS} items, found {item_count}")

    return rooms


def new_world(directory: str | Path = config.ROOMS_DIR, starting_room: str = config.STARTING_ROOM) -> World:
    """Build the world for a new game from the room definitions."""
    rooms = load_rooms(directory)
    if starting_room not in rooms:
        raise WorldLoadError(f"Starting room '{starting_room}' is not defined")

    world = World(rooms=rooms, current_room_id=starting_room)
    world.current_room.visited = True
    if config.DEBUG:
        debug(world)
    return world
