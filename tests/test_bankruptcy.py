"""
Tests for the shortfall protocol and bankruptcy.
"""

from grubaryba import ComputerLevel, GameEngine, GameSettings, RandomDie, ScriptedDie
from grubaryba.board import Board
from grubaryba.events import EventType
from grubaryba.fields import no_op_field, punishment_field
from grubaryba.player import PlayerStatus


def give(game, player, name):
    game.rules.assign(player, game.board.get_property(name))


def test_unpaid_commission_bankrupts(econ_game, make_human):
    """Commission 50 owed with 30 cash and nothing sold ends in bankruptcy."""
    alice = econ_game.add_human_player(make_human("Alice"))
    bob_human = make_human("Bob")
    bob = econ_game.add_human_player(bob_human)
    give(econ_game, alice, "Anemonia")
    give(econ_game, bob, "Grota")
    give(econ_game, bob, "Menella")
    bob.cash = 30

    econ_game.rules.on_step_on(bob, econ_game.board.get_field(1))

    assert bob_human.sell_queries == ["Grota", "Menella"]
    assert bob.status == PlayerStatus.BANKRUPT
    assert bob.properties == []
    assert bob.cash == 30
    assert not econ_game.board.get_property("Grota").is_owned()
    assert not econ_game.board.get_property("Menella").is_owned()
    # Creditor receives nothing from a bankrupt debtor
    assert alice.cash == 500

    event = econ_game.event_log.get_events(EventType.BANKRUPTCY)[0]
    assert event.player_id == bob.player_id
    assert event.details["creditor"] == alice.player_id
    assert event.details["properties"] == ["Grota", "Menella"]


def test_every_property_offered_even_after_shortfall_is_covered(econ_game, make_human):
    alice = econ_game.add_human_player(make_human("Alice"))
    bob_human = make_human("Bob", sell={"Grota", "Menella"})
    bob = econ_game.add_human_player(bob_human)
    give(econ_game, alice, "Anemonia")
    give(econ_game, bob, "Grota")
    give(econ_game, bob, "Menella")
    bob.cash = 30

    econ_game.rules.on_step_on(bob, econ_game.board.get_field(1))

    # 30 + 150 (Grota) + 50 (Menella) - 50
    assert bob_human.sell_queries == ["Grota", "Menella"]
    assert bob.cash == 180
    assert bob.properties == []
    assert not bob.is_bankrupt


def test_unpaid_fee_bankrupts(econ_game, make_human):
    alice = econ_game.add_human_player(make_human("Alice"))
    alice.cash = 99

    econ_game.rules.on_step_on(alice, econ_game.board.get_field(4))

    assert alice.is_bankrupt
    assert alice.cash == 99


def test_unpaid_deposit_fee_bankrupts_and_stops_further_effects(econ_game, make_human):
    alice = econ_game.add_human_player(make_human("Alice"))
    alice.cash = 10

    econ_game.board.step_on(alice, 4, 3, econ_game.rules)

    assert alice.is_bankrupt
    assert econ_game.board.get_field(5).pool == 0
    assert alice.waiting_turns == 0


def test_bankrupt_player_takes_no_more_turns(make_human):
    """A bankrupt player is skipped for the rest of the match."""
    board = Board(
        [
            no_op_field("Wyspa"),
            punishment_field("Rekin", 1000),
            no_op_field("Plaza"),
            no_op_field("Molo"),
        ]
    )
    engine = GameEngine(board=board, settings=GameSettings(starting_cash=500))
    engine.set_die(ScriptedDie([1] + [4] * 20))
    for name in ("Alice", "Bob", "Carol"):
        engine.add_human_player(make_human(name))

    engine.play(3)

    alice, bob, carol = engine.players
    assert alice.is_bankrupt
    assert alice.position == 1
    rolls = engine.event_log.get_events(EventType.DICE_ROLL)
    assert [e.player_id for e in rolls] == [0, 1, 2, 1, 2, 1, 2]
    assert not bob.is_bankrupt and not carol.is_bankrupt
    assert engine.round_number == 3


def test_ownership_stays_consistent_over_a_long_match():
    """Every owned property is listed by exactly its owner, bankrupts own nothing."""
    engine = GameEngine(settings=GameSettings(starting_cash=600))
    engine.set_die(RandomDie(seed=7))
    for level in (ComputerLevel.SMARTASS, ComputerLevel.DUMB, ComputerLevel.SMARTASS, ComputerLevel.DUMB):
        engine.add_computer_player(level)

    engine.play(60)

    for prop in engine.board.properties():
        holders = [p for p in engine.players if prop.name in p.properties]
        if prop.is_owned():
            assert holders == [engine.players[prop.owner_id]]
        else:
            assert holders == []
    for player in engine.players:
        if player.is_bankrupt:
            assert player.properties == []
