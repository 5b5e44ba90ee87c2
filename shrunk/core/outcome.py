from collections.abc import Iterable

from shrunk import config
from shrunk.core.world import World
from shrunk.messages import BaseMessage, GameOverMessage, narrate


def have_all_items(inventory: Iterable[str], required: Iterable[str] = config.REQUIRED_ITEMS) -> bool:
    """True if every required item is in the inventory."""
    return set(required) <= set(inventory)


def missing_items(inventory: Iterable[str], required: Iterable[str] = config.REQUIRED_ITEMS) -> list[str]:
    return sorted(set(required) - set(inventory))


def check_arrival(world: World) -> list[BaseMessage]:
    """Evaluate the win condition after the player has moved.

    Reaching the workshop with everything wins the game. Reaching it with
    pieces missing only earns a hint; the player can leave again.
    """
    if world.current_room_id != config.TERMINAL_ROOM:
        return []

    if have_all_items(world.inventory):
        world.status = "won"
        return [GameOverMessage(outcome="won", content=(
            "You climb onto the workbench and spread out everything you collected.\n"
            "You splice the copper wire into the battery, load the software into the shrink ray,\n"
            "and flip the dial from SHRINK to GROW.\n"
            "ZZZAP! The room rushes away from you and suddenly you're your normal size again.\n"
            "You hear the car pull into the driveway. Mom and Dad will never know."
        ))]

    return [narrate(
        "The workbench is right here, but you don't have everything you need to fix this yet.",
        f"You're still missing: {', '.join(missing_items(world.inventory))}.",
    )]


def give_up(world: World) -> list[BaseMessage]:
    """Call the parents. Without every required item this ends the game."""
    if have_all_items(world.inventory):
        return [narrate(
            "You pick up the phone, then put it down again.",
            f"You already have everything you need. Get to the {config.TERMINAL_ROOM}!",
        )]

    world.status = "lost"
    return [GameOverMessage(outcome="lost", content=(
        "You dial the number and squeak into the receiver as loud as you can.\n"
        "Mom and Dad rush home and find you standing on the floor, no taller than a thimble.\n"
        "They fix the shrink ray in five minutes flat.\n"
        "You're grounded forever."
    ))]
