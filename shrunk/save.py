from datetime import datetime
from pathlib import Path
from typing import Literal

from devtools import debug
from pydantic import BaseModel, Field, ValidationError, model_validator

from . import config
from .core.errors import SnapshotError
from .core.item import Item
from .core.room import Room
from .core.world import World


class GameSnapshot(BaseModel):
    """Everything needed to resume a game, as written to a save file."""

    version: Literal[1] = config.SNAPSHOT_VERSION
    current_room: str
    rooms: dict[str, Room]
    inventory: dict[str, Item] = Field(default_factory=dict)
    perch: str | None = None

    @model_validator(mode="after")
    def check_current_room(self):
        if self.current_room not in self.rooms:
            raise ValueError(f"current room '{self.current_room}' is not one of the saved rooms")
        return self

    @classmethod
    def from_world(cls, world: World) -> "GameSnapshot":
        return cls(
            current_room=world.current_room_id,
            rooms=world.rooms,
            inventory=world.inventory,
            perch=world.perch,
        )

    def to_world(self) -> World:
        return World(
            rooms=self.rooms,
            inventory=self.inventory,
            current_room_id=self.current_room,
            perch=self.perch,
        )


def snapshot_name(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"{config.SAVE_PREFIX}{now.strftime('%Y%m%d-%H%M%S-%f')}.json"


def save_snapshot(world: World, directory: str | Path = config.SAVE_DIR) -> Path:
    """Save game state to a new, uniquely named JSON file.

    Args:
        world: The world to save
        directory: Where to put the file

    Returns:
        Path of the written file
    """
    path = Path(directory) / snapshot_name()
    while path.exists():
        path = Path(directory) / snapshot_name()
    try:
        path.write_text(GameSnapshot.from_world(world).model_dump_json(indent=2))
    except OSError as e:
        raise SnapshotError(f"Could not save the game: {e.strerror}") from e
    return path


def load_snapshot(filepath: str | Path) -> World:
    """
    Load a saved game and build a fresh World from it.

    The file is fully parsed and validated before anything is returned, so
    a bad file never touches the game in progress.

    Args:
        filepath: Path to the save file

    Returns:
        A new World instance
    """
    path = Path(filepath)
    try:
        text = path.read_text()
    except FileNotFoundError:
        raise SnapshotError(f"File '{filepath}' not found!") from None
    except OSError as e:
        raise SnapshotError(f"Could not read '{filepath}': {e.strerror}") from e

    try:
        snapshot = GameSnapshot.model_validate_json(text)
    except ValidationError as e:
        raise SnapshotError(f"'{filepath}' is not a saved game ({e.error_count()} problems found)") from e

    if config.DEBUG:
        debug(snapshot)
    return snapshot.to_world()
