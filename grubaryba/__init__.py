"""
Gruba Ryba game engine

A deterministic engine for a Monopoly-style board economy game.
"""

from grubaryba.agents import ComputerLevel, DecisionProvider, Human
from grubaryba.board import Board, create_default_board
from grubaryba.config import GameSettings, get_game_settings
from grubaryba.dice import Die, RandomDie, ScriptedDie
from grubaryba.game import GameEngine, GameState, create_game
from grubaryba.player import Player, PlayerStatus

__all__ = [
    "ComputerLevel",
    "DecisionProvider",
    "Human",
    "Board",
    "create_default_board",
    "GameSettings",
    "get_game_settings",
    "Die",
    "RandomDie",
    "ScriptedDie",
    "GameEngine",
    "GameState",
    "create_game",
    "Player",
    "PlayerStatus",
]
