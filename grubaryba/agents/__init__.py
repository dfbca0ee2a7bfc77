from grubaryba.agents.base import DecisionProvider, Human
from grubaryba.agents.human import HumanStrategy
from grubaryba.agents.computer import (
    ComputerLevel,
    DumbStrategy,
    SmartassStrategy,
    computer_name,
    create_computer_strategy,
)

__all__ = [
    "DecisionProvider",
    "Human",
    "HumanStrategy",
    "ComputerLevel",
    "DumbStrategy",
    "SmartassStrategy",
    "computer_name",
    "create_computer_strategy",
]
