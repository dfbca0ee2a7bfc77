#!/usr/bin/env python3
"""
Minimal CLI for playing Gruba Ryba.

Computer players of either level can be mixed with humans answering on the
console.
"""

import argparse
import logging
from typing import List

from grubaryba import ComputerLevel, GameSettings, Human, RandomDie, create_game
from game_logger import GameLogger


class ConsoleHuman(Human):
    """Human answering questions typed on the console."""

    def __init__(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    def want_buy(self, property_name: str) -> bool:
        return self._ask(f"{self.name}, buy {property_name}? [y/N] ")

    def want_sell(self, property_name: str) -> bool:
        return self._ask(f"{self.name}, you are short of cash. Sell {property_name}? [y/N] ")

    def clone(self) -> "ConsoleHuman":
        return ConsoleHuman(self.name)

    @staticmethod
    def _ask(prompt: str) -> bool:
        return input(prompt).strip().lower() in ("y", "yes")


def parse_levels(value: str) -> List[ComputerLevel]:
    """Parse a comma separated list of computer levels."""
    if not value:
        return []
    try:
        return [ComputerLevel(part.strip().lower()) for part in value.split(",")]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"unknown computer level in '{value}'") from e


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(description="Play a game of Gruba Ryba")
    parser.add_argument(
        "--players",
        type=parse_levels,
        default=[ComputerLevel.DUMB, ComputerLevel.SMARTASS],
        help="Computer players as a comma separated list of levels (dumb, smartass)",
    )
    parser.add_argument(
        "--human",
        action="append",
        default=[],
        metavar="NAME",
        help="Add a human player answering on the console (repeatable)",
    )
    parser.add_argument("--rounds", type=int, default=20, help="Maximum number of rounds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the die")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to JSONL log file (default: no event log)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log engine details")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = GameSettings()
    seed = args.seed if args.seed is not None else settings.seed
    engine = create_game(
        settings=settings,
        computer_levels=args.players,
        humans=[ConsoleHuman(name) for name in args.human],
        die=RandomDie(seed=seed),
    )

    engine.play(args.rounds)

    if args.log_file:
        game_logger = GameLogger(args.log_file)
        game_logger.flush_engine_events(engine)
        game_logger.log_final_standings(engine)
        print(f"\nGame logged to: {game_logger.log_file}")


if __name__ == "__main__":
    main()
