"""Base classes for players' decision makers."""

from abc import ABC, abstractmethod


class DecisionProvider(ABC):
    """
    Abstract base class for whoever decides on behalf of a player.

    The engine asks exactly two kinds of questions: whether to buy an unowned
    property the player landed on, and whether to sell an owned property when
    cash runs short. Every call blocks until an answer is given.

    Attributes:
        name: The player's display name.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def want_buy(self, property_name: str) -> bool:
        """Return True to buy the named property."""

    @abstractmethod
    def want_sell(self, property_name: str) -> bool:
        """Return True to sell the named property."""

    @abstractmethod
    def clone(self) -> "DecisionProvider":
        """Return an equivalent, independent decision maker."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class Human(ABC):
    """
    A person taking part in the game.

    Purchases for a human go as follows:
    (1) when a field can be bought, the human is asked `want_buy`;
    (2) when the human wants to buy but lacks cash, it is asked `want_sell`
        about *every* owned property and all the chosen ones are sold;
    (3) when the human wants to buy and can pay, the property is bought.
    """

    @abstractmethod
    def get_name(self) -> str:
        """Return the human's name."""

    @abstractmethod
    def want_buy(self, property_name: str) -> bool:
        """Return True to buy the named property."""

    @abstractmethod
    def want_sell(self, property_name: str) -> bool:
        """Return True to sell the named property when short of cash."""

    @abstractmethod
    def clone(self) -> "Human":
        """Return a copy of this human."""
