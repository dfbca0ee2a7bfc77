"""Shared test fixtures for Gruba Ryba tests."""

import pytest

from grubaryba import GameEngine, GameSettings, Human, ScriptedDie
from grubaryba.board import Board
from grubaryba.fields import (
    aquarium_field,
    deposit_field,
    no_op_field,
    property_field,
    punishment_field,
    reward_field,
)
from grubaryba.properties import public_property, real_estate


class ScriptedHuman(Human):
    """Human with fixed answers that remembers every question."""

    def __init__(self, name, buy=True, sell=()):
        self.name = name
        self.buy = buy
        self.sell = set(sell)
        self.buy_queries = []
        self.sell_queries = []

    def get_name(self):
        return self.name

    def want_buy(self, property_name):
        self.buy_queries.append(property_name)
        return self.buy

    def want_sell(self, property_name):
        self.sell_queries.append(property_name)
        return property_name in self.sell

    def clone(self):
        return ScriptedHuman(self.name, self.buy, self.sell)


@pytest.fixture
def make_human():
    """Factory for scripted humans."""
    return ScriptedHuman


@pytest.fixture
def settings():
    """Default settings with a smaller starting purse."""
    return GameSettings(starting_cash=500)


@pytest.fixture
def econ_board():
    """
    Nine-field board with one field of each kind.

    0 Start (50, also on pass) | 1 Anemonia (RE 200, commission 50) | 2 Wyspa
    3 Grota (public 300, commission 120) | 4 Rekin (fee 100) | 5 Laguna (deposit 15)
    6 Akwarium (2 turns) | 7 Błazenki (reward 120) | 8 Menella (RE 100, commission 20)
    """
    return Board(
        [
            reward_field("Start", 50, reward_on_pass=True),
            property_field(real_estate("Anemonia", 200, 0.25)),
            no_op_field("Wyspa"),
            property_field(public_property("Grota", 300, 0.4)),
            punishment_field("Rekin", 100),
            deposit_field("Laguna", 15),
            aquarium_field("Akwarium", 2),
            reward_field("Błazenki", 120),
            property_field(real_estate("Menella", 100, 0.2)),
        ]
    )


@pytest.fixture
def econ_game(econ_board, settings):
    """Engine on the economy board with a single die and no players yet."""
    engine = GameEngine(board=econ_board, settings=settings)
    engine.set_die(ScriptedDie([1]))
    return engine
