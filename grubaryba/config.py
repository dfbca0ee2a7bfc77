"""
Game configuration using pydantic-settings.

Every value can be overridden through the environment (prefix GRUBARYBA_)
or a local .env file:
    GRUBARYBA_STARTING_CASH                   - cash each player starts with (default: 1000)
    GRUBARYBA_MIN_PLAYERS                     - players required to start (default: 2)
    GRUBARYBA_MAX_PLAYERS                     - players allowed to join (default: 8)
    GRUBARYBA_REAL_ESTATE_COMMISSION_RATE     - share of price owed on real estate (default: 0.2)
    GRUBARYBA_PUBLIC_PROPERTY_COMMISSION_RATE - share of price owed on public property (default: 0.4)
    GRUBARYBA_SALE_RATIO                      - share of price returned on a forced sale (default: 0.5)
    GRUBARYBA_ROLLS_PER_TURN                  - die rolls summed into one move (default: 1)
    GRUBARYBA_SEED                            - seed for the CLI's random die
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """Configuration for a Gruba Ryba match."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="GRUBARYBA_",
    )

    starting_cash: int = Field(default=1000, ge=0, description="Cash each player starts with.")
    min_players: int = Field(default=2, ge=1, description="Players required before play.")
    max_players: int = Field(default=8, ge=1, description="Upper bound on joined players.")

    real_estate_commission_rate: float = Field(
        default=0.2,
        ge=0,
        description="Commission on real estate as a fraction of its price.",
    )
    public_property_commission_rate: float = Field(
        default=0.4,
        ge=0,
        description="Commission on public property as a fraction of its price.",
    )
    sale_ratio: float = Field(
        default=0.5,
        ge=0,
        le=1,
        description="Fraction of the price paid back when a property is sold off.",
    )

    rolls_per_turn: int = Field(default=1, ge=1, description="Die rolls summed into one move.")
    seed: Optional[int] = None

    @field_validator("max_players")
    @classmethod
    def check_player_bounds(cls, value: int, info):
        """Reject a maximum below the minimum."""
        min_players = info.data.get("min_players", 1)
        if value < min_players:
            raise ValueError(f"max_players ({value}) must be >= min_players ({min_players})")
        return value


@lru_cache
def get_game_settings() -> GameSettings:
    """Return cached game settings instance."""
    return GameSettings()
