"""Deterministic computer players."""

from enum import Enum

from grubaryba.agents.base import DecisionProvider


class ComputerLevel(Enum):
    """
    Playing level of a computer player.

    DUMB buys every third property it lands on that can be bought;
    SMARTASS buys every one of them.
    """

    DUMB = "dumb"
    SMARTASS = "smartass"


def computer_name(number: int) -> str:
    """Name of the computer player that joined at 1-based position `number`."""
    return f"Player{number}"


class DumbStrategy(DecisionProvider):
    """
    Buys on every third purchase offer and never sells.

    The counter advances on every offer, whether or not the purchase
    eventually goes through.
    """

    BUY_EVERY = 3

    def __init__(self, number: int):
        super().__init__(computer_name(number))
        self.number = number
        self.offers = 0

    def want_buy(self, property_name: str) -> bool:
        self.offers += 1
        return self.offers % self.BUY_EVERY == 0

    def want_sell(self, property_name: str) -> bool:
        return False

    def clone(self) -> "DumbStrategy":
        return DumbStrategy(self.number)


class SmartassStrategy(DecisionProvider):
    """Buys everything it is offered and sells whatever it is asked to."""

    def __init__(self, number: int):
        super().__init__(computer_name(number))
        self.number = number

    def want_buy(self, property_name: str) -> bool:
        return True

    def want_sell(self, property_name: str) -> bool:
        return True

    def clone(self) -> "SmartassStrategy":
        return SmartassStrategy(self.number)


def create_computer_strategy(level: ComputerLevel, number: int) -> DecisionProvider:
    """Build the decision maker for a computer player of the given level."""
    if level == ComputerLevel.DUMB:
        return DumbStrategy(number)
    if level == ComputerLevel.SMARTASS:
        return SmartassStrategy(number)
    raise ValueError(f"Unknown computer level: {level!r}")
