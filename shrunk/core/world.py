from typing import Literal

from pydantic import BaseModel, Field, model_validator

from shrunk.core.errors import NotFound, NotVisible, PreconditionFailed
from shrunk.core.item import Item
from shrunk.core.room import Room
from shrunk.core.triggers import INSPECTIONS, TRANSITIONS
from shrunk.messages import BaseMessage, InventoryMessage, LocationMessage, narrate

GameStatus = Literal["ongoing", "won", "lost", "exited"]


class World(BaseModel):
    """
    Game world containing rooms, the player's inventory, and game state.

    There is exactly one World per session and every handler works on it
    through these methods. An item is always owned by exactly one container:
    the items of some room or the inventory.
    """

    # Content
    rooms: dict[str, Room] = Field(default_factory=dict)

    # Runtime state
    inventory: dict[str, Item] = Field(default_factory=dict)
    current_room_id: str
    perch: str | None = None  # Furniture the player is standing on
    status: GameStatus = "ongoing"

    @model_validator(mode="after")
    def check_current_room(self):
        if self.current_room_id not in self.rooms:
            raise ValueError(f"Room '{self.current_room_id}' does not exist")
        return self

    @property
    def current_room(self) -> Room:
        return self.rooms[self.current_room_id]

    @property
    def finished(self) -> bool:
        return self.status != "ongoing"

    # Looking around
    def look_at_room(self) -> LocationMessage:
        """Repeat the long description of the current room."""
        room = self.current_room
        return LocationMessage(
            title=room.name,
            description=room.describe(),
            items=room.visible_items(),
        )

    def look_at_item(self, name: str) -> list[BaseMessage]:
        """Describe an item in the inventory or the current room.

        Looking at an item that hides something reveals the hidden object
        the first time only.

        Raises:
            NotVisible: the item is in the room but not discovered yet
            NotFound: the item is nowhere in reach
        """
        if name == "inventory":
            return [InventoryMessage(items=self.list_inventory())]

        room = self.current_room
        hook = INSPECTIONS.get((room.name, name))
        if hook is not None:
            return hook(self)

        if name in self.inventory:
            item = self.inventory[name]
        elif name in room.items:
            item = room.items[name]
            if not item.discovered:
                raise NotVisible("You cannot see that, at least not from here!")
        else:
            raise NotFound(f"{name} not found.")

        return [narrate(item.description), *self._reveal_hidden(item)]

    def _reveal_hidden(self, item: Item) -> list[BaseMessage]:
        if not item.contains_hidden_object:
            return []
        companion = self.current_room.items.get(item.hidden_object)
        if companion is None:
            return []

        item.contains_hidden_object = False
        if companion.discovered:
            return []
        companion.discovered = True
        return [narrate(item.discovery_statement or f"You notice the {companion.name}.")]

    def reveal(self, name: str) -> Item:
        """Make an item in the current room visible."""
        item = self.room_item(name)
        item.discovered = True
        return item

    def room_item(self, name: str) -> Item:
        try:
            return self.current_room.items[name]
        except KeyError:
            raise NotFound(f"{name} not found.") from None

    # Inventory
    def take_item(self, name: str) -> Item:
        """Move a discovered, portable item from the current room to the inventory."""
        room = self.current_room
        item = room.items.get(name)
        if item is None or not item.discovered:
            raise NotFound(f"{name} not found.")
        if item.is_feature:
            raise PreconditionFailed(f"The {name} isn't going anywhere.")
        if item.too_big:
            raise PreconditionFailed(
                f"{name} is too big to pick up!\nWhy don't you try to SHRINK it first?"
            )

        self.inventory[name] = item
        del room.items[name]
        return item

    def drop_item(self, name: str) -> Item:
        """Move an item from the inventory to the current room."""
        room = self.current_room
        if name not in self.inventory:
            raise NotFound(f"{name} not found.")
        if name in room.items:
            raise PreconditionFailed(f"There is already a {name} here.")

        item = self.inventory[name]
        room.items[name] = item
        del self.inventory[name]
        return item

    def eat_item(self, name: str) -> Item:
        """Consume an edible item from the inventory."""
        item = self.inventory.get(name)
        if item is None:
            raise NotFound(f"{name} is not in your backpack.")
        if not item.is_edible:
            raise PreconditionFailed(f"I know you're hangry. But {name} is not food!")
        del self.inventory[name]
        return item

    def list_inventory(self) -> list[str]:
        return list(self.inventory)

    def has_item(self, name: str) -> bool:
        return name in self.inventory

    # Movement
    def resolve_alias(self, requested: str) -> str:
        """Return the canonical room name for an alternate spelling."""
        if requested in self.rooms:
            return requested
        for room in self.rooms.values():
            if room.matches_alias(requested):
                return room.name
        return requested

    def check_not_perched(self) -> None:
        if self.perch is not None:
            raise PreconditionFailed(f"You need to CLIMB DOWN from the {self.perch} first.")

    def move_to_room(self, requested: str) -> list[BaseMessage]:
        """Move the player through one of the current room's exits.

        Scripted transitions registered for the (from, to) pair run before
        the move is committed and may send the player somewhere else.

        Raises:
            PreconditionFailed: the player is perched or lacks the exit item
            NotFound: the requested room is not an exit from here
        """
        self.check_not_perched()

        room = self.current_room
        blocker = room.exit_blocker
        if blocker is not None and blocker.item not in self.inventory:
            raise PreconditionFailed(f"You cannot leave because {blocker.reason}.")

        requested = self.resolve_alias(requested)
        if requested not in room.exits or requested not in self.rooms:
            raise NotFound(f"{requested} is not a valid exit")

        destination = self.rooms[requested]
        messages: list[BaseMessage] = []

        trigger = TRANSITIONS.get((room.name, destination.name))
        if trigger is not None:
            result = trigger(self, destination)
            messages.extend(result.messages)
            if result.redirect is not None:
                destination = self.rooms[result.redirect]

        messages.append(self.enter(destination))
        return messages

    def relocate(self, room_name: str) -> LocationMessage:
        """Put the player in a room without going through an exit."""
        try:
            room = self.rooms[room_name]
        except KeyError:
            raise NotFound(f"{room_name} not found.") from None
        return self.enter(room)

    def enter(self, room: Room) -> LocationMessage:
        self.current_room_id = room.name
        if not room.visited:
            room.visited = True
            description = room.describe()
        else:
            description = room.brief_describe()
        return LocationMessage(title=room.name, description=description, items=room.visible_items())
