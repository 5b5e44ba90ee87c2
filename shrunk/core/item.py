from pydantic import BaseModel, Field, model_validator


class Item(BaseModel):
    """
    Something in the world: either a portable object or a fixed feature.

    Objects can end up in the player's inventory, features never leave
    their room. Both share the discovery and description behaviour.
    """

    name: str
    description: str

    is_feature: bool = False
    too_big: bool = False  # Portable, but has to be shrunk before pickup
    discovered: bool = True
    is_edible: bool = False

    # One-shot reveal of a companion item in the same room
    contains_hidden_object: bool = False
    hidden_object: str | None = None
    discovery_statement: str | None = Field(
        default=None,
        description="Printed once when looking at this item reveals the hidden object",
    )

    @model_validator(mode="after")
    def check_hidden_object(self):
        if self.contains_hidden_object and not self.hidden_object:
            raise ValueError(f"'{self.name}' contains a hidden object but does not name it")
        return self
