from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from shrunk import config
from shrunk.core.command import Command, Verb
from shrunk.core.command_parser import parse, title_case
from shrunk.core.errors import GameError, InvalidCommand, NotFound, PreconditionFailed, SnapshotError
from shrunk.core.outcome import check_arrival, give_up
from shrunk.core.world import World
from shrunk.messages import BaseMessage, InventoryMessage, SystemMessage, error, narrate
from shrunk.save import load_snapshot, save_snapshot


class Game:
    """
    One play session: the active world plus the collaborators handlers need.

    Args:
        world: The world being played
        confirm: Asks the player a yes/no question
        save_dir: Where snapshots are written
    """

    def __init__(
        self,
        world: World,
        confirm: Callable[[str], bool] = lambda question: True,
        save_dir: str | Path = config.SAVE_DIR,
    ):
        self.world = world
        self.confirm = confirm
        self.save_dir = Path(save_dir)

    @property
    def finished(self) -> bool:
        return self.world.finished

    def execute(self, command_input: str) -> list[BaseMessage]:
        """Parse and run one line of player input."""
        result = parse(self.world, command_input)
        if result.empty:
            return []
        if result.error_msg:
            return [error(result.error_msg)]
        return self.dispatch(result.command)

    def dispatch(self, command: Command) -> list[BaseMessage]:
        handler = HANDLERS[command.verb]
        try:
            return handler(self, command)
        except GameError as e:
            return [error(e.message)]


Handler = Callable[[Game, Command], list[BaseMessage]]

HANDLERS: dict[Verb, Handler] = {}


def handles(verb: Verb) -> Callable[[Handler], Handler]:
    def register(func: Handler) -> Handler:
        HANDLERS[verb] = func
        return func

    return register


@dataclass
class Climb:
    text: str
    reveals: str | None = None
    perch: bool = True  # Whether the player ends up standing on it


# (room, feature) -> what happens when the player climbs it
CLIMBS: dict[tuple[str, str], Climb] = {
    ("Basement Lab", "desk"): Climb(
        "You climb up the desk and are face to face with the computer. "
        "It seems locked, why don't you take a LOOK?",
        reveals="computer",
    ),
    ("Large Bedroom", "desk"): Climb("You had better not climb on your parent's desk!", perch=False),
    ("Pantry", "paper towels"): Climb(
        "From up on the paper towels you can get a better look at the shelves.\n"
        "There is a box of cornflakes pushed all the way back on one of the shelves.\n"
        "Weren't you looking for cornflakes?",
        reveals="cornflakes",
    ),
    ("Dining Room", "dining room table"): Climb(
        "From on top of the dining room table you can get a better look at the candelabra.\n"
        "There's wax everywhere but it looks like there might still be a bit of candle left. "
        "Is that a candle? Look closer.",
        reveals="candle",
    ),
}

# Things that are stuck in place until cut loose
CUTTABLE = {("Family Room", "copper wire"), ("Living Room", "couch stuffing")}

# Where the bedroom shortcuts lead
SHORTCUTS = {
    "fireplace": ("GERONIMO!!!!", "Living Room"),
    "laundry": ("HERE GOES NOTHING", "Basement Lab"),
    "chute": ("HERE GOES NOTHING", "Basement Lab"),
}
SHORTCUT_ROOMS = {"Large Bedroom", "Small Bedroom"}

HELP_TEXT = """\
Here are some of the commands the game understands:

inventory :: Lists the contents of your inventory.
mystuff :: see inventory
look :: Print the long form explanation of the current room.
look at <feature or object> :: Examine something in the room or in your inventory.
go <room> / go to <room> / <room> :: Proceed through the indicated exit to the next room.
take <object> :: Acquire an object, putting it into your inventory.
grab, pull, yank :: see take
drop <object> :: Remove an object from your inventory, dropping it in the current room.
eat <object> :: Restore your strength by eating an item.
shrink <object> :: Zap something with the shrink ray.
whistle :: With the right item at hand, you can whistle to summon the family pet.
call :: Call your parents to come get you. This ends the game!
enter :: Type a secret password into a computer.
climb <furniture> :: Climb the furniture. Use "climb down" to get back to the floor.
use <object> :: Make use of an item in your inventory.
taunt <target> :: Pick a fight!
jump / slide :: Get vertical! Travel quickly!
cut <object> :: Snip something loose.
savegame :: Saves the state of the game to a file.
loadgame <file> :: Loads the game state from a file, after asking you first.
exit / quit :: Save the game and then exit.
help :: Print this message."""


@handles(Verb.LOOK)
def look(game: Game, command: Command) -> list[BaseMessage]:
    if command.argument:
        return game.world.look_at_item(command.argument)
    if len(command.tokens) > 1 and command.tokens[1] == "at":
        return [narrate("What would you like to look at?")]
    return [game.world.look_at_room()]


@handles(Verb.GO)
def go(game: Game, command: Command) -> list[BaseMessage]:
    if not command.argument:
        return [narrate("Go where?")]
    messages = game.world.move_to_room(title_case(command.argument))
    return messages + check_arrival(game.world)


@handles(Verb.GOTO)
def goto(game: Game, command: Command) -> list[BaseMessage]:
    return [narrate("Go To Statement Considered Harmful!  https://xkcd.com/292")]


@handles(Verb.TAKE)
def take(game: Game, command: Command) -> list[BaseMessage]:
    if not command.argument:
        return [narrate("Take what?")]
    item = game.world.take_item(command.argument)
    return [narrate(f"You have picked up the {item.name}.", "It is now in your INVENTORY.")]


@handles(Verb.DROP)
def drop(game: Game, command: Command) -> list[BaseMessage]:
    if not command.argument:
        return [narrate("Drop what?")]
    item = game.world.drop_item(command.argument)
    return [narrate(f"You dropped the {item.name} in the {game.world.current_room_id}.")]


@handles(Verb.INVENTORY)
def inventory(game: Game, command: Command) -> list[BaseMessage]:
    return [InventoryMessage(items=game.world.list_inventory())]


@handles(Verb.EAT)
def eat(game: Game, command: Command) -> list[BaseMessage]:
    if not command.argument:
        return [narrate("Eat what?")]
    game.world.eat_item(command.argument)
    return [narrate("That was delicious! Your strength has been restored.")]


@handles(Verb.USE)
def use(game: Game, command: Command) -> list[BaseMessage]:
    if not command.argument:
        return [narrate("Use what?")]
    if command.argument != "umbrella":
        raise InvalidCommand("I don't know how to USE that, can you use a more specific action?")

    world = game.world
    if not world.has_item("umbrella"):
        raise PreconditionFailed("You don't have an umbrella.")
    if world.current_room_id != "Yard":
        raise PreconditionFailed("You can't open the umbrella inside!")

    eagle = world.current_room.items.get("eagle")
    if eagle is not None:
        eagle.discovered = False
    return [narrate(
        "You open the umbrella and are completely hidden from the eagle.",
        "Not finding lunch, the eagle flies away.",
    )]


@handles(Verb.CLIMB)
def climb(game: Game, command: Command) -> list[BaseMessage]:
    world = game.world
    if not command.argument:
        return [narrate("Climb what? The corporate ladder?")]

    if command.argument == "down":
        if world.perch is None:
            return [narrate("You're already on the floor.")]
        perch, world.perch = world.perch, None
        return [narrate(f"You climb down from the {perch}.")]

    if world.perch is not None:
        raise PreconditionFailed(f"You're already up on the {world.perch}. CLIMB DOWN first.")

    target = CLIMBS.get((world.current_room_id, command.argument))
    if target is None:
        raise PreconditionFailed("You can't climb on that!")

    if target.perch:
        world.perch = command.argument
    if target.reveals is not None and target.reveals in world.current_room.items:
        world.reveal(target.reveals)
    return [narrate(target.text)]


@handles(Verb.SHRINK)
def shrink(game: Game, command: Command) -> list[BaseMessage]:
    world = game.world
    if not command.argument:
        return [narrate("Shrink what?")]
    if not world.has_item("shrink ray"):
        raise PreconditionFailed("You need the shrink ray to shrink things.")
    if command.argument == "shrink ray":
        raise PreconditionFailed("You can't shrink the shrink ray.")

    item = world.current_room.items.get(command.argument)
    if item is None or not item.discovered:
        raise NotFound(f"{command.argument} not found.")
    if item.is_feature:
        raise PreconditionFailed("You can't shrink this. Mom and Dad might notice!")
    if not item.too_big:
        raise PreconditionFailed("I don't think that can get any smaller. Did you try to just TAKE it?")

    item.too_big = False
    return [narrate("SHRINKING!", "This item is now small enough to collect. You can TAKE it now.")]


@handles(Verb.WHISTLE)
def whistle(game: Game, command: Command) -> list[BaseMessage]:
    world = game.world
    if not world.has_item("dog whistle"):
        raise PreconditionFailed("The dog can't hear you without the dog whistle.")

    if world.current_room_id == "Staircase":
        dog = world.current_room.items.get("dog")
        if dog is not None and dog.discovery_statement:
            return [narrate(dog.discovery_statement)]
        return [narrate("The dog thumps his tail but he's already right here.")]

    world.check_not_perched()
    return [
        narrate(
            "You hear the padding footsteps of your loyal steed.",
            f"He comes loping into the {world.current_room_id.lower()}.",
            "You grab onto him and he starts running.",
            "When he finally slows down on the stairs you jump off.",
        ),
        world.relocate("Staircase"),
    ]


@handles(Verb.CALL)
def call(game: Game, command: Command) -> list[BaseMessage]:
    if not game.confirm("Are you sure you want to call your parents? You'll be grounded forever"):
        return [narrate("Good call. You can still fix this yourself.")]
    return give_up(game.world)


@handles(Verb.ENTER)
def enter(game: Game, command: Command) -> list[BaseMessage]:
    world = game.world
    if not world.has_item("password"):
        raise PreconditionFailed("I don't think you know the password.")

    computer = world.current_room.items.get("computer")
    if world.current_room_id != "Basement Lab" or computer is None or not computer.discovered:
        return [narrate("There's nothing that needs a password here.")]
    if "software" not in world.current_room.items:
        return [narrate("The computer is already unlocked.")]

    world.reveal("software")
    return [narrate("ACCESS GRANTED", "TAKE the software you need.")]


@handles(Verb.TAUNT)
def taunt(game: Game, command: Command) -> list[BaseMessage]:
    world = game.world
    eagle = world.current_room.items.get("eagle")
    if command.argument != "eagle" or eagle is None:
        return [narrate("There's nobody here to taunt but yourself.")]

    messages: list[BaseMessage] = []
    if not eagle.discovered:
        messages.append(narrate("The eagle has heard your taunts and it has made him mad!"))
        eagle.discovered = True
    messages.append(narrate(
        "The eagle swoops down and carries you off over the rooftops.",
        "It loses its grip over the chimney and you drop down into the large bedroom.",
    ))
    world.perch = None
    messages.append(world.relocate("Large Bedroom"))
    return messages


def _shortcut(game: Game, command: Command) -> list[BaseMessage] | None:
    world = game.world
    if world.current_room_id not in SHORTCUT_ROOMS:
        return None
    for word in command.tokens[1:]:
        if word in SHORTCUTS:
            world.check_not_perched()
            shout, destination = SHORTCUTS[word]
            return [narrate(shout), world.relocate(destination)]
    return None


@handles(Verb.JUMP)
def jump(game: Game, command: Command) -> list[BaseMessage]:
    messages = _shortcut(game, command)
    if messages is not None:
        return messages
    if game.world.current_room_id in ("Pantry", "Upstairs Hallway", "Basement Lab"):
        return [narrate("You jump as high as you can, but it's not nearly high enough. Maybe you could CLIMB something?")]
    return [narrate("Jump all you want, it's not going to do you any good.")]


@handles(Verb.SLIDE)
def slide(game: Game, command: Command) -> list[BaseMessage]:
    messages = _shortcut(game, command)
    if messages is not None:
        return messages
    return [narrate(
        "Sliiiiiide to the left *clap* Sliiiiiide to the right.",
        "You can't remember any more of the dance.",
    )]


@handles(Verb.CUT)
def cut(game: Game, command: Command) -> list[BaseMessage]:
    world = game.world
    if not command.argument:
        return [narrate("Cut what?")]

    if (world.current_room_id, command.argument) in CUTTABLE:
        item = world.room_item(command.argument)
        if not item.discovered:
            raise NotFound(f"{command.argument} not found.")
        item.too_big = False
        world.take_item(item.name)
        return [narrate("snip snip", f"You have picked up the {item.name}.", "It is now in your INVENTORY.")]

    world.room_item(command.argument)
    return [narrate("Please don't cut that.")]


@handles(Verb.SAVEGAME)
def savegame(game: Game, command: Command) -> list[BaseMessage]:
    path = save_snapshot(game.world, game.save_dir)
    return [SystemMessage(content=f"Saved game {path}")]


@handles(Verb.LOADGAME)
def loadgame(game: Game, command: Command) -> list[BaseMessage]:
    filename = command.raw_argument
    if not filename:
        return [narrate("Please specify a saved game to load.")]
    if not Path(filename).exists():
        raise NotFound(f"File '{filename}' not found!")
    if not game.confirm(f"Load game '{filename}'. Are you sure?"):
        return [narrate("Never mind, then.")]

    # Replaced in one step, and only once the file has loaded cleanly
    game.world = load_snapshot(filename)
    return [SystemMessage(content=f"Loaded game {filename}"), game.world.look_at_room()]


@handles(Verb.EXIT)
def exit_game(game: Game, command: Command) -> list[BaseMessage]:
    try:
        messages = savegame(game, command)
    except SnapshotError as e:
        messages = [error(e.message)]
    game.world.status = "exited"
    return messages + [narrate("Goodbye!")]


@handles(Verb.HELP)
def show_help(game: Game, command: Command) -> list[BaseMessage]:
    return [SystemMessage(content=HELP_TEXT, title="Help")]
