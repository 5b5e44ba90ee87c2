from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from .command import VERB_SYNONYMS, Command, Verb

if TYPE_CHECKING:
    from .world import World

# Words dropped between the verb and its argument, e.g. "look at", "go to"
CONNECTORS = {"at", "to"}


class ParseResult(BaseModel):
    """Result of parsing a player's command input"""

    command: Command | None = Field(
        default=None, description="The parsed command if the input was valid"
    )
    error_msg: str | None = Field(
        default=None,
        description="Error message if the input could not be parsed",
    )

    @property
    def empty(self) -> bool:
        return self.command is None and self.error_msg is None


def normalize_command(command_input: str) -> list[str]:
    """Lower-case the input and split it into words.

    Args:
        command_input: Raw command string from user

    Returns:
        List of tokens, empty for blank input
    """
    return command_input.strip().lower().split()


def title_case(words: str) -> str:
    """Capitalize each word, the way room names are written."""
    return " ".join(word.capitalize() for word in words.split())


def parse(world: "World", command_input: str) -> ParseResult:
    """Turn a line of player input into a command.

    Args:
        world: The game world, used to recognise bare room names
        command_input: The command string to parse

    Returns:
        ParseResult containing either a Command or an error message. Both
        are None for blank input.
    """
    tokens = normalize_command(command_input)
    if not tokens:
        return ParseResult()

    # Typing just a room name means going there
    room_name = title_case(" ".join(tokens))
    if room_name in world.rooms:
        return ParseResult(command=Command(verb=Verb.GO, argument=room_name, tokens=tokens))

    verb = VERB_SYNONYMS.get(tokens[0])
    if verb is None:
        return ParseResult(error_msg=f"Not a valid command: {command_input.strip().lower()}")

    args = tokens[1:]
    if args and args[0] in CONNECTORS:
        args = args[1:]

    return ParseResult(
        command=Command(
            verb=verb,
            argument=" ".join(args),
            raw_argument=raw_argument(command_input),
            tokens=tokens,
        )
    )


def raw_argument(command_input: str) -> str:
    """Everything after the first word, case preserved and quotes removed."""
    parts = command_input.strip().split(maxsplit=1)
    if len(parts) == 1:
        return ""

    args = parts[1].strip()
    # Remove surrounding quotes if present (both single and double quotes)
    if len(args) > 1 and args[0] == args[-1] and args[0] in "'\"":
        args = args[1:-1].strip()
    return args
