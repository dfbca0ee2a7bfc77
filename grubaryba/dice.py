"""
Dice used to move players around the board.
"""

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class Die(ABC):
    """A source of move lengths."""

    @abstractmethod
    def roll(self) -> int:
        """Return the result of one roll (never negative)."""

    @abstractmethod
    def clone(self) -> "Die":
        """Return an independent die with the same distribution."""


class RandomDie(Die):
    """Fair die with `sides` faces numbered from 1."""

    def __init__(self, sides: int = 6, seed: Optional[int] = None):
        if sides < 1:
            raise ValueError("A die needs at least one side")
        self.sides = sides
        self.seed = seed
        self.rng = random.Random(seed)

    def roll(self) -> int:
        return self.rng.randint(1, self.sides)

    def clone(self) -> "RandomDie":
        return RandomDie(self.sides, self.seed)

    def __repr__(self) -> str:
        return f"RandomDie(sides={self.sides}, seed={self.seed})"


class ScriptedDie(Die):
    """
    Die that replays a fixed sequence of results, starting over when exhausted.

    Useful for reproducible matches and demonstrations.
    """

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        if not self.values:
            raise ValueError("ScriptedDie needs at least one value")
        if any(v < 0 for v in self.values):
            raise ValueError("Die results cannot be negative")
        self._index = 0

    def roll(self) -> int:
        value = self.values[self._index % len(self.values)]
        self._index += 1
        return value

    def clone(self) -> "ScriptedDie":
        return ScriptedDie(self.values)

    def __repr__(self) -> str:
        return f"ScriptedDie({self.values})"
