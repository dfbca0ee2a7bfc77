"""
Custom exception hierarchy for the Gruba Ryba engine.

Configuration errors surface to whoever drives the engine. Ownership errors
signal a broken invariant inside the rules and are not meant to be handled.
"""


class GrubaRybaError(Exception):
    """Base exception for all game-related errors."""


class ConfigurationError(GrubaRybaError):
    """The match cannot be set up or started as requested."""


class NoDieError(ConfigurationError):
    """No die was handed to the engine before play."""

    def __init__(self):
        super().__init__("No die set up to play a game")


class TooManyPlayersError(ConfigurationError):
    """The player list is already full."""

    def __init__(self, max_players: int):
        super().__init__(f"Max number of players exceeded (max {max_players})")
        self.max_players = max_players


class TooFewPlayersError(ConfigurationError):
    """Not enough players joined to start."""

    def __init__(self, min_players: int):
        super().__init__(f"Min number of players required (min {min_players})")
        self.min_players = min_players


class GameAlreadyPlayedError(ConfigurationError):
    """The engine already ran its match."""

    def __init__(self):
        super().__init__("Game has already been played")


class OwnershipError(GrubaRybaError):
    """Property ownership would become inconsistent."""


class AlreadyOwnedError(OwnershipError):
    """Attempt to take over a property somebody else owns."""

    def __init__(self, property_name: str, owner_id: int):
        super().__init__(f"Property '{property_name}' is already owned by player {owner_id}")
        self.property_name = property_name
        self.owner_id = owner_id
