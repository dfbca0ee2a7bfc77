"""
Ownable properties and their commissions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from grubaryba.exceptions import AlreadyOwnedError


class PropertyKind(Enum):
    """Kinds of ownable properties."""

    REAL_ESTATE = "real_estate"
    PUBLIC_PROPERTY = "public_property"


@dataclass
class Property:
    """
    A property that can be bought, owned and sold back.

    The owner is stored as the owning player's id only; the player keeps the
    authoritative list of what it owns.
    """

    name: str
    price: int
    kind: PropertyKind
    commission_rate: float
    owner_id: Optional[int] = None

    @property
    def commission(self) -> int:
        """Fee a non-owner pays the owner when landing here."""
        return round(self.price * self.commission_rate)

    def is_owned(self) -> bool:
        """Check if property is owned by any player."""
        return self.owner_id is not None

    def sale_value(self, ratio: float) -> int:
        """Cash returned to the owner when the property is sold off."""
        return round(self.price * ratio)

    def take_over(self, player_id: int) -> None:
        """Make `player_id` the owner."""
        if self.owner_id is not None and self.owner_id != player_id:
            raise AlreadyOwnedError(self.name, self.owner_id)
        self.owner_id = player_id

    def release(self) -> None:
        """Return the property to the unowned pool."""
        self.owner_id = None

    def __repr__(self) -> str:
        return f"Property(name='{self.name}', price={self.price}, kind={self.kind.value}, owner={self.owner_id})"


def real_estate(name: str, price: int, commission_rate: float = 0.2) -> Property:
    """Create a real estate property."""
    return Property(name, price, PropertyKind.REAL_ESTATE, commission_rate)


def public_property(name: str, price: int, commission_rate: float = 0.4) -> Property:
    """Create a public property."""
    return Property(name, price, PropertyKind.PUBLIC_PROPERTY, commission_rate)
