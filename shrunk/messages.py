from typing import Literal

import click
from pydantic import BaseModel, Field


class BaseMessage(BaseModel):
    """Base class for all messages to the player."""
    message_type: str = Field(description="Discriminator field for message type")

    def render(self) -> str:
        raise NotImplementedError


class LocationMessage(BaseMessage):
    """Room description with the things the player can see."""
    message_type: Literal["location"] = "location"
    title: str  # Room name
    description: str
    items: list[str] = Field(default_factory=list)  # Discovered items only

    def render(self) -> str:
        lines = [click.style(self.title, fg="green", bold=True), self.description]
        if self.items:
            lines.append("Some of the things that you see include:")
            lines.extend(click.style(name, fg="cyan") for name in self.items)
        return "\n".join(lines)


class NarrationMessage(BaseMessage):
    """Story text produced by an action."""
    message_type: Literal["narration"] = "narration"
    content: str

    def render(self) -> str:
        return self.content


class InventoryMessage(BaseMessage):
    """Contents of the player's backpack."""
    message_type: Literal["inventory"] = "inventory"
    items: list[str] = Field(default_factory=list)

    def render(self) -> str:
        if not self.items:
            return "Your backpack is empty."
        return "\n".join(click.style(name, fg="cyan") for name in self.items)


class SystemMessage(BaseMessage):
    """System notification or information."""
    message_type: Literal["system"] = "system"
    content: str
    title: str | None = None
    severity: Literal["info", "warning", "error"] = "info"

    def render(self) -> str:
        color = {"info": "blue", "warning": "yellow", "error": "red"}[self.severity]
        if self.title:
            return click.style(f"[{self.title}] ", fg=color, bold=True) + self.content
        return click.style(self.content, fg=color)


class GameOverMessage(BaseMessage):
    """Final narration once the session has been won or lost."""
    message_type: Literal["game_over"] = "game_over"
    outcome: Literal["won", "lost"]
    content: str

    def render(self) -> str:
        banner = "YOU WIN!" if self.outcome == "won" else "GAME OVER"
        color = "green" if self.outcome == "won" else "red"
        return f"{self.content}\n\n{click.style(banner, fg=color, bold=True)}"


def narrate(*lines: str) -> NarrationMessage:
    """Join lines of story text into a single message."""
    return NarrationMessage(content="\n".join(lines))


def error(content: str) -> SystemMessage:
    return SystemMessage(content=content, severity="error")
