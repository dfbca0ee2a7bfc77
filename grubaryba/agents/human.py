"""Decision maker backed by a human."""

from grubaryba.agents.base import DecisionProvider, Human


class HumanStrategy(DecisionProvider):
    """Forwards every question to a `Human` and waits for the answer."""

    def __init__(self, human: Human):
        super().__init__(human.get_name())
        self.human = human

    def want_buy(self, property_name: str) -> bool:
        return bool(self.human.want_buy(property_name))

    def want_sell(self, property_name: str) -> bool:
        return bool(self.human.want_sell(property_name))

    def clone(self) -> "HumanStrategy":
        return HumanStrategy(self.human.clone())
