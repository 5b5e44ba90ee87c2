"""Scripted story beats.

Transitions fire when the player moves from one room to another through an
exit. They can add narration and can send the player somewhere other than
the room they asked for. Inspections replace the normal description when
the player looks at a particular item in a particular room.

Both tables are filled with decorators, so a new story beat only needs a
new function here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from shrunk.messages import BaseMessage, narrate

if TYPE_CHECKING:
    from shrunk.core.room import Room
    from shrunk.core.world import World


@dataclass
class TriggerResult:
    messages: list[BaseMessage] = field(default_factory=list)
    redirect: str | None = None  # Room the player ends up in instead


Transition = Callable[["World", "Room"], TriggerResult]
Inspection = Callable[["World"], list[BaseMessage]]

TRANSITIONS: dict[tuple[str, str], Transition] = {}
INSPECTIONS: dict[tuple[str, str], Inspection] = {}


def transition(from_room: str, to_room: str) -> Callable[[Transition], Transition]:
    """Register a transition for moving from `from_room` to `to_room`."""

    def register(func: Transition) -> Transition:
        TRANSITIONS[(from_room, to_room)] = func
        return func

    return register


def inspection(room: str, item: str) -> Callable[[Inspection], Inspection]:
    """Register a replacement for looking at `item` while in `room`."""

    def register(func: Inspection) -> Inspection:
        INSPECTIONS[(room, item)] = func
        return func

    return register


@transition("Attic", "Upstairs Hallway")
def bungee_out_of_attic(world: World, destination: Room) -> TriggerResult:
    if world.has_item("thread"):
        return TriggerResult([narrate(
            "You tie one end of the thread around your waist and the other around the top rung of the attic ladder.",
            "Here goes nothing!",
            "You leap out of the attic door and the thread acts as a bungee.",
            "It catches you right before you smash into the upstairs hallway.",
            "As you're hanging, catching your breath, it unravels from the ladder and you drop with a small thud.",
            "You gather up the thread and put it in your backpack.",
        )])
    return TriggerResult([narrate(
        "You lower yourself down the attic ladder one enormous rung at a time.",
        "By the time you reach the bottom your arms are shaking. Something like a long piece of thread would make this easier.",
    )])


@transition("Upstairs Hallway", "Attic")
def lasso_into_attic(world: World, destination: Room) -> TriggerResult:
    if world.has_item("thread"):
        return TriggerResult([narrate(
            "You throw the thread up like a lasso and it attaches to the bottom of the ladder to the attic.",
            "You free climb up it like the Man in Black from the Princess Bride on the Cliffs of Insanity.",
            "You look so cool.",
        )])
    return TriggerResult([narrate(
        "You jump for the bottom rung of the attic ladder again and again until you finally catch it.",
        "You don't look cool at all.",
    )])


@transition("Upstairs Hallway", "Large Bedroom")
def bounce_into_large_bedroom(world: World, destination: Room) -> TriggerResult:
    if destination.visited:
        return TriggerResult()
    return TriggerResult([narrate(
        "The door to the large bedroom is closed and you can't reach it at this size.",
        "You take a running start and hurl yourself at your dad's exercise ball.",
        "You bounce off of it with a loud *VWOMP* and grab onto the door handle.",
        "You're just heavy enough to make the handle turn and the door creaks open.",
        "You drop to the floor and walk right in.",
    )])


@transition("Staircase", "Downstairs Hallway")
def down_the_banister(world: World, destination: Room) -> TriggerResult:
    if world.has_item("scarf"):
        return TriggerResult([narrate("You use the scarf to slide quickly and safely down the banister.")])
    return TriggerResult([narrate(
        "You try to slide down the banister but your jeans don't slide down easily so it's more of a scooch.",
        "After a couple of minutes of struggling you're sweaty and have worn a hole in the seat of your pants.",
        "You fall off the banister halfway down and tumble down the rest of the stairs.",
        "The dog just raises his head and looks at you while you flail helplessly.",
        "You land with another thud, thankfully nothing seems broken.",
        "You should have grabbed that silky scarf.",
    )])


@transition("Downstairs Hallway", "Staircase")
def up_the_stairs(world: World, destination: Room) -> TriggerResult:
    if world.has_item("dog whistle"):
        return TriggerResult([narrate(
            "Oof that's a lot of stairs to climb.",
            "But you have the dog whistle!",
            "You hear the padding footsteps of your loyal steed. He comes loping into the downstairs hallway.",
            "You grab onto him and he bounds up the stairs.",
        )])
    return TriggerResult([narrate(
        "Oof that's a lot of stairs to climb.",
        "You scream in frustration and your wailing wakes the dog up.",
        "He takes pity on you and picks you up by the scruff and drops you off on the stairs.",
        "You're drenched and smell terrible now but at least you didn't have to climb them.",
    )])


@transition("Kitchen", "Yard")
@transition("Garden Shed", "Yard")
def eagle_ambush(world: World, destination: Room) -> TriggerResult:
    eagle = destination.items.get("eagle")
    if eagle is None or not eagle.discovered:
        return TriggerResult()
    if world.has_item("umbrella"):
        return TriggerResult([narrate(
            "A shadow sweeps over the grass. High above, an eagle is circling.",
            "Good thing you brought the umbrella.",
        )])
    return TriggerResult(
        [narrate(
            "The eagle swoops down and picks you up!",
            "You manage to wriggle free and drop down the chimney into the large bedroom.",
        )],
        redirect="Large Bedroom",
    )


@inspection("Yard", "eagle")
def look_at_eagle(world: World) -> list[BaseMessage]:
    eagle = world.current_room.items.get("eagle")
    if eagle is None or not eagle.discovered:
        return [narrate("Hmm...the eagle doesn't seem to be here right now.")]
    if world.has_item("umbrella"):
        return [narrate(
            "If you want to use the umbrella to hide from the eagle say: use umbrella",
            "If you want to be taken by the eagle say: taunt eagle",
        )]
    return [
        narrate(
            "The eagle swoops down and picks you up, you manage to wriggle free "
            "and drop down the chimney into the large bedroom.",
        ),
        world.relocate("Large Bedroom"),
    ]
