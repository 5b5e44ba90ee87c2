class GameError(Exception):
    """Base class for failures that are reported to the player.

    The message is player-facing text; the command loop prints it and
    carries on.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(GameError):
    """The item or room is not in the scope that was searched."""


class NotVisible(GameError):
    """The item is in the room but has not been discovered yet."""


class PreconditionFailed(GameError):
    """The action is understood but cannot happen right now."""


class InvalidCommand(GameError):
    """Unknown verb or a verb missing its argument."""


class SnapshotError(GameError):
    """A saved game could not be written or read back."""


class WorldLoadError(Exception):
    """The room definitions are unusable. The game cannot start."""
