"""
Player state and economy.
"""

from enum import Enum
from typing import List

from grubaryba.agents.base import DecisionProvider
from grubaryba.dice import Die


class PlayerStatus(Enum):
    """Whether a player still takes turns."""

    ACTIVE = "active"
    BANKRUPT = "bankrupt"


class Player:
    """
    Represents the complete state of a player in the game.

    `properties` lists the names of owned properties in the order they were
    acquired. Ownership changes go through `grubaryba.rules.FieldRules` so the
    list always matches the properties' `owner_id`.
    """

    def __init__(self, player_id: int, strategy: DecisionProvider, starting_cash: int):
        self.player_id = player_id
        self.strategy = strategy
        self.cash = starting_cash
        self.position = 0
        self.properties: List[str] = []
        self.status = PlayerStatus.ACTIVE
        self.waiting_turns = 0

    @property
    def name(self) -> str:
        return self.strategy.name

    @property
    def is_bankrupt(self) -> bool:
        return self.status == PlayerStatus.BANKRUPT

    def can_afford(self, amount: int) -> bool:
        """Check if the player has at least `amount` cash."""
        return self.cash >= amount

    def earn(self, amount: int) -> None:
        """Add `amount` to the player's cash."""
        if amount < 0:
            raise ValueError("Cannot earn a negative amount")
        self.cash += amount

    def pay(self, amount: int) -> bool:
        """
        Take `amount` from the player's cash.
        Returns True if paid, False (leaving cash untouched) if funds are insufficient.
        """
        if amount < 0:
            raise ValueError("Cannot pay a negative amount")
        if not self.can_afford(amount):
            return False
        self.cash -= amount
        return True

    def roll(self, die: Die, times: int = 1) -> int:
        """Roll `die` `times` times and return the total."""
        return sum(die.roll() for _ in range(times))

    def move_to(self, position: int) -> None:
        self.position = position

    def want_buy(self, property_name: str) -> bool:
        return self.strategy.want_buy(property_name)

    def want_sell(self, property_name: str) -> bool:
        return self.strategy.want_sell(property_name)

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id}, name='{self.name}', "
            f"cash={self.cash}, position={self.position}, bankrupt={self.is_bankrupt})"
        )
