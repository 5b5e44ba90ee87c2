from enum import Enum

from pydantic import BaseModel, Field


class Verb(str, Enum):
    LOOK = "look"
    GO = "go"
    GOTO = "goto"
    TAKE = "take"
    DROP = "drop"
    INVENTORY = "inventory"
    EAT = "eat"
    USE = "use"
    CLIMB = "climb"
    SHRINK = "shrink"
    WHISTLE = "whistle"
    CALL = "call"
    ENTER = "enter"
    TAUNT = "taunt"
    JUMP = "jump"
    SLIDE = "slide"
    CUT = "cut"
    SAVEGAME = "savegame"
    LOADGAME = "loadgame"
    EXIT = "exit"
    HELP = "help"


# Every word the player can start a command with
VERB_SYNONYMS: dict[str, Verb] = {verb.value: verb for verb in Verb} | {
    "grab": Verb.TAKE,
    "pull": Verb.TAKE,
    "yank": Verb.TAKE,
    "mystuff": Verb.INVENTORY,
    "quit": Verb.EXIT,
    "surrender": Verb.CALL,
    "giveup": Verb.CALL,
}


class Command(BaseModel):
    """
    A tokenized player command.
    """

    verb: Verb
    argument: str = Field(
        default="",
        description="Words after the verb and any connector word, joined with single spaces.",
    )
    raw_argument: str = Field(
        default="",
        description="Everything after the verb with its original case, for file names.",
    )
    tokens: list[str] = Field(
        default_factory=list,
        description="All lower-cased words of the input, verb included.",
    )
