from typing import TYPE_CHECKING, List, Optional, Sequence

from grubaryba.config import GameSettings
from grubaryba.fields import (
    Field,
    FieldType,
    aquarium_field,
    deposit_field,
    no_op_field,
    property_field,
    punishment_field,
    reward_field,
)
from grubaryba.properties import Property, public_property, real_estate

if TYPE_CHECKING:
    from grubaryba.player import Player
    from grubaryba.rules import FieldRules


class Board:
    """A cyclic sequence of fields."""

    def __init__(self, fields: Sequence[Field]):
        if not fields:
            raise ValueError("A board needs at least one field")
        self.fields: List[Field] = list(fields)

        names = [p.name for p in self.properties()]
        if len(names) != len(set(names)):
            raise ValueError("Property names must be unique on a board")

    def __len__(self) -> int:
        return len(self.fields)

    def get_field(self, position: int) -> Field:
        """Get the field at the given position."""
        return self.fields[position % len(self.fields)]

    def properties(self) -> List[Property]:
        """All properties on the board, in board order."""
        return [f.property for f in self.fields if f.field_type == FieldType.PROPERTY]

    def get_property(self, name: str) -> Optional[Property]:
        """Look a property up by name."""
        for prop in self.properties():
            if prop.name == name:
                return prop
        return None

    def passed_positions(self, from_position: int, steps: int) -> List[int]:
        """Positions strictly between the start and the landing field, in walking order."""
        size = len(self.fields)
        return [(from_position + offset) % size for offset in range(1, steps % size)]

    def step_on(self, player: "Player", from_position: int, steps: int, rules: "FieldRules") -> int:
        """
        Walk `player` forward `steps` fields from `from_position`.

        Fires the pass-by effect of every field in between, then the step-on
        effect of the landing field. Whole laps land on the starting field.

        Args:
            player: The moving player
            from_position: Current position of the player
            steps: Non-negative move length
            rules: Applies the field effects

        Returns:
            The landing position. Storing it on the player is up to the caller.
        """
        if steps < 0:
            raise ValueError("Cannot move backwards")
        size = len(self.fields)
        to = (from_position + steps) % size

        for position in self.passed_positions(from_position, steps):
            rules.on_pass_by(player, self.fields[position])
        rules.on_step_on(player, self.fields[to])
        return to


def create_default_board(settings: Optional[GameSettings] = None) -> Board:
    """Create the standard 12-field board."""
    settings = settings or GameSettings()
    re_rate = settings.real_estate_commission_rate
    pub_rate = settings.public_property_commission_rate

    return Board(
        [
            reward_field("Start", 50, reward_on_pass=True),
            property_field(real_estate("Anemonia", 160, re_rate)),
            no_op_field("Wyspa"),
            property_field(real_estate("Aporina", 220, re_rate)),
            aquarium_field("Akwarium", 3),
            property_field(public_property("Grota", 300, pub_rate)),
            property_field(real_estate("Menella", 280, re_rate)),
            deposit_field("Laguna", 15),
            property_field(public_property("Statek", 250, pub_rate)),
            reward_field("Błazenki", 120),
            property_field(real_estate("Kalmar", 400, re_rate)),
            punishment_field("Rekin", 180),
        ]
    )
