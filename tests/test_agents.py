"""
Tests for decision makers: computer levels and the human adapter.
"""

import pytest

from grubaryba.agents import (
    ComputerLevel,
    DumbStrategy,
    HumanStrategy,
    SmartassStrategy,
    create_computer_strategy,
)


def test_dumb_buys_every_third_offer():
    """Offers 1..6 are answered with purchases on 3 and 6 only."""
    dumb = DumbStrategy(1)

    answers = [dumb.want_buy(f"Field{i}") for i in range(1, 7)]

    assert answers == [False, False, True, False, False, True]


def test_dumb_never_sells():
    dumb = DumbStrategy(1)

    assert not dumb.want_sell("Grota")


def test_smartass_buys_and_sells_everything():
    smartass = SmartassStrategy(2)

    assert all(smartass.want_buy(name) for name in ("Grota", "Statek", "Kalmar"))
    assert smartass.want_sell("Grota")


@pytest.mark.parametrize("level,cls", [(ComputerLevel.DUMB, DumbStrategy), (ComputerLevel.SMARTASS, SmartassStrategy)])
def test_factory(level, cls):
    strategy = create_computer_strategy(level, 4)

    assert isinstance(strategy, cls)
    assert strategy.name == "Player4"


def test_dumb_clone_starts_counting_afresh():
    dumb = DumbStrategy(1)
    dumb.want_buy("A")
    dumb.want_buy("B")

    copy = dumb.clone()

    assert copy.name == "Player1"
    assert not copy.want_buy("C")
    assert dumb.want_buy("C")


class TestHumanStrategy:
    """Tests for the adapter around a Human."""

    def test_forwards_questions(self, make_human):
        human = make_human("Alice", buy=False, sell={"Grota"})
        strategy = HumanStrategy(human)

        assert strategy.name == "Alice"
        assert not strategy.want_buy("Statek")
        assert strategy.want_sell("Grota")
        assert not strategy.want_sell("Statek")
        assert human.buy_queries == ["Statek"]
        assert human.sell_queries == ["Grota", "Statek"]

    def test_clone_wraps_cloned_human(self, make_human):
        human = make_human("Alice")
        copy = HumanStrategy(human).clone()

        assert copy.name == "Alice"
        assert copy.human is not human
