import sys

import click

from .core.dispatcher import Game
from .core.errors import WorldLoadError
from .persist import new_world

OPENING_MESSAGE = """
It was a bright and sunny afternoon. Everything was going fine.
Your parents were developing new semi-legal technology in their lab,
and you were watching them. They've told you 100 times to not watch them
while they work, but what are they going to do? You're curious.
The shrink ray! What a cool invention. Now anything can be made smaller!
They've told you not to play with the inventions 101 times, but what are they
going to do? You're curious.
So yeah, they did kick you out of the lab when they left to go run errands,
telling you 102 times to not touch anything, but you smuggled the
shrink ray out anyway.
That's the last thing you remember. You open your eyes and seem to be in a
giant cavern. Everything is so big! Wait...you're so small!
Where are you? How will you fix this? Is there anywhere you could GO TO?
Is there anything you could TAKE to help you? Why don't you try to LOOK around?
"""


def play(game: Game) -> None:
    """Read commands until the game ends or input runs out."""
    click.echo(OPENING_MESSAGE)
    while not game.finished:
        try:
            command = click.prompt(">", default="", show_default=False, prompt_suffix=" ")
            messages = game.execute(command)
        except click.Abort:
            click.echo("\nGoodbye!")
            return

        for message in messages:
            click.echo(message.render())


@click.command()
def main():
    """Shrunk! A text adventure about being very, very small."""
    try:
        world = new_world()
    except WorldLoadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    play(Game(world, confirm=click.confirm))


if __name__ == "__main__":
    main()
