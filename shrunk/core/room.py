import re

from pydantic import BaseModel, Field, field_validator, model_validator

from .item import Item


class ExitBlocker(BaseModel):
    """
    An item the player must carry to leave a room.
    """
    item: str
    reason: str  # Finishes "You cannot leave because ..."


class Room(BaseModel):
    """
    Room in the game world.

    Contains both descriptive properties and
    runtime state that changes during gameplay.
    """

    # ID, also what the player types to go here
    name: str
    alias: str | None = None  # Regex matching other spellings of the name

    # Descriptive properties (generally immutable after creation)
    brief_description: str
    long_description: str

    # Room exits, by room name
    exits: list[str] = Field(default_factory=list)
    exit_blocker: ExitBlocker | None = None

    # Runtime state
    items: dict[str, Item] = Field(default_factory=dict)
    visited: bool = False

    @field_validator("alias")
    @classmethod
    def check_alias(cls, alias: str | None) -> str | None:
        if alias is not None:
            try:
                re.compile(alias)
            except re.error as e:
                raise ValueError(f"alias is not a valid pattern: {e}") from e
        return alias

    @field_validator("exits")
    @classmethod
    def check_exits(cls, exits: list[str]) -> list[str]:
        if len(set(exits)) != len(exits):
            raise ValueError("exits must not repeat a room")
        return exits

    @model_validator(mode="after")
    def check_item_keys(self):
        for key, item in self.items.items():
            if key != item.name:
                raise ValueError(f"item stored as '{key}' is named '{item.name}'")
        return self

    def describe(self) -> str:
        """Get a full description of the room."""
        return self.long_description

    def brief_describe(self) -> str:
        """Get a brief description of the room."""
        return self.brief_description

    def matches_alias(self, requested: str) -> bool:
        return self.alias is not None and re.search(self.alias, requested, re.IGNORECASE) is not None

    def visible_items(self) -> list[str]:
        """Names of the discovered items, in definition order."""
        return [name for name, item in self.items.items() if item.discovered]
