"""
Main game engine: player registration and the round/turn loop.
"""

import logging
import sys
from enum import Enum
from typing import Iterable, List, Optional, TextIO

from grubaryba.agents import ComputerLevel, DecisionProvider, Human, HumanStrategy, create_computer_strategy
from grubaryba.board import Board, create_default_board
from grubaryba.config import GameSettings
from grubaryba.dice import Die
from grubaryba.events import EventLog, EventType
from grubaryba.exceptions import (
    GameAlreadyPlayedError,
    NoDieError,
    TooFewPlayersError,
    TooManyPlayersError,
)
from grubaryba.player import Player
from grubaryba.rules import FieldRules

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Lifecycle of a match."""

    CONFIGURING = "configuring"
    RUNNING = "running"
    FINISHED = "finished"


class GameEngine:
    """
    Runs a single match of Gruba Ryba.

    Players and the die are set up first; `play` then runs the match once.
    Players move in the order they joined and all of them roll the same die.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        settings: Optional[GameSettings] = None,
        out: Optional[TextIO] = None,
    ):
        self.settings = settings or GameSettings()
        self.board = board if board is not None else create_default_board(self.settings)
        self.out = out
        self.event_log = EventLog()

        self.die: Optional[Die] = None
        self.players: List[Player] = []
        self.rules = FieldRules(self.players, self.board, self.settings, self.event_log)

        self.state = GameState.CONFIGURING
        self.round_number = 0

    # === CONFIGURATION ===

    def set_die(self, die: Optional[Die]) -> None:
        """Hand over the die. None is ignored."""
        if die is None:
            return
        self.die = die

    def add_computer_player(self, level: ComputerLevel) -> Player:
        """Add a computer player named after its position in the player list."""
        self._check_can_join()
        strategy = create_computer_strategy(level, len(self.players) + 1)
        return self._join(strategy)

    def add_human_player(self, human: Optional[Human]) -> Optional[Player]:
        """Add a human player. None is ignored."""
        if human is None:
            return None
        self._check_can_join()
        return self._join(HumanStrategy(human))

    def _check_can_join(self) -> None:
        if self.state != GameState.CONFIGURING:
            raise GameAlreadyPlayedError()
        if len(self.players) >= self.settings.max_players:
            raise TooManyPlayersError(self.settings.max_players)

    def _join(self, strategy: DecisionProvider) -> Player:
        player = Player(len(self.players), strategy, self.settings.starting_cash)
        self.players.append(player)
        logger.debug(f"{player.name} joined as player {player.player_id}")
        return player

    # === PLAY ===

    def get_active_players(self) -> List[Player]:
        """Get all non-bankrupt players."""
        return [p for p in self.players if not p.is_bankrupt]

    def is_game_on(self) -> bool:
        """At least two players are still solvent."""
        return len(self.get_active_players()) >= 2

    @property
    def winner(self) -> Optional[Player]:
        """The last solvent player, if the match ended by bankruptcies."""
        active = self.get_active_players()
        if self.state == GameState.FINISHED and len(active) == 1:
            return active[0]
        return None

    def play(self, rounds: int) -> None:
        """
        Play at most `rounds` rounds.

        One round is one move of every solvent player. The match ends early
        once fewer than two players remain solvent.

        Raises:
            NoDieError: No die was set
            TooFewPlayersError: Not enough players joined
            GameAlreadyPlayedError: The match was already played
        """
        if rounds < 0:
            raise ValueError("Number of rounds cannot be negative")
        if self.state != GameState.CONFIGURING:
            raise GameAlreadyPlayedError()
        if self.die is None:
            raise NoDieError()
        if len(self.players) < self.settings.min_players:
            raise TooFewPlayersError(self.settings.min_players)

        self.state = GameState.RUNNING
        self.event_log.log(
            EventType.GAME_START,
            players=[p.name for p in self.players],
            starting_cash=self.settings.starting_cash,
            rounds=rounds,
        )
        logger.info(f"Starting game with {len(self.players)} players for up to {rounds} rounds")

        for _ in range(rounds):
            if not self._play_round():
                break

        self._finish()

    def _play_round(self) -> bool:
        """Play one round. Returns False if the match is over."""
        self.round_number += 1
        self._print(f"Round: {self.round_number}")
        self.event_log.log(EventType.ROUND_START, round=self.round_number)

        for player in self.players:
            if player.is_bankrupt:
                continue
            self.take_turn(player)
            if not self.is_game_on():
                return False
        return True

    def take_turn(self, player: Player) -> None:
        """Move `player` once, or let it sit out a turn while waiting."""
        if player.waiting_turns > 0:
            player.waiting_turns -= 1
            self.event_log.log(EventType.WAIT, player.player_id, turns_left=player.waiting_turns)
            return

        steps = player.roll(self.die, self.settings.rolls_per_turn)
        self.event_log.log(EventType.DICE_ROLL, player.player_id, total=steps)

        from_position = player.position
        to_position = self.board.step_on(player, from_position, steps, self.rules)
        player.move_to(to_position)

        self.event_log.log(
            EventType.MOVE,
            player.player_id,
            **{"from": from_position, "to": to_position, "steps": steps},
        )
        logger.debug(f"{player.name} moved {from_position} -> {to_position} ({steps} steps)")

    def _finish(self) -> None:
        self.state = GameState.FINISHED
        winner = self.winner
        self.event_log.log(
            EventType.GAME_END,
            winner.player_id if winner is not None else None,
            rounds_played=self.round_number,
        )
        logger.info(
            f"Game finished after {self.round_number} rounds"
            + (f", winner: {winner.name}" if winner is not None else "")
        )
        for player in self.players:
            self._print(self.player_summary(player))

    # === REPORTING ===

    def player_summary(self, player: Player) -> str:
        """One-line summary of a player's standing."""
        if player.is_bankrupt:
            return f"{player.name} *** bankrupt *** cash: {player.cash} properties: []"
        field = self.board.get_field(player.position)
        waiting = f" *** waiting: {player.waiting_turns} ***" if player.waiting_turns else ""
        owned = ", ".join(player.properties)
        return f"{player.name} field: {field.name}{waiting} cash: {player.cash} properties: [{owned}]"

    def _print(self, line: str) -> None:
        print(line, file=self.out or sys.stdout)


def create_game(
    settings: Optional[GameSettings] = None,
    computer_levels: Iterable[ComputerLevel] = (),
    humans: Iterable[Human] = (),
    die: Optional[Die] = None,
    board: Optional[Board] = None,
) -> GameEngine:
    """Factory function to create a configured engine. Computers join before humans."""
    engine = GameEngine(board=board, settings=settings)
    engine.set_die(die)
    for level in computer_levels:
        engine.add_computer_player(level)
    for human in humans:
        engine.add_human_player(human)
    return engine
