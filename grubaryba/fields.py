"""
Board field definitions and types.

Every field is a `Field` tagged with a `FieldType`; the payload that matters
depends on the type:
    PROPERTY   - `property`
    REWARD     - `amount` credited (also on pass-by when `reward_on_pass`)
    PUNISHMENT - `amount` debited
    DEPOSIT    - `amount` charged to passing players, collected in `pool`
    AQUARIUM   - `amount` turns the player has to sit out
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from grubaryba.properties import Property


class FieldType(Enum):
    """Types of fields on the board."""

    NO_OP = "no_op"
    PROPERTY = "property"
    REWARD = "reward"
    PUNISHMENT = "punishment"
    DEPOSIT = "deposit"
    AQUARIUM = "aquarium"


@dataclass
class Field:
    """A single board field."""

    name: str
    field_type: FieldType
    property: Optional[Property] = None
    amount: int = 0
    reward_on_pass: bool = False
    pool: int = 0

    def __repr__(self) -> str:
        return f"Field(name='{self.name}', type={self.field_type.value})"


def no_op_field(name: str) -> Field:
    """A field where nothing happens."""
    return Field(name, FieldType.NO_OP)


def property_field(prop: Property) -> Field:
    """A field holding an ownable property, named after it."""
    return Field(prop.name, FieldType.PROPERTY, property=prop)


def reward_field(name: str, reward: int, reward_on_pass: bool = False) -> Field:
    """A field paying out `reward`."""
    if reward < 0:
        raise ValueError("Reward cannot be negative")
    return Field(name, FieldType.REWARD, amount=reward, reward_on_pass=reward_on_pass)


def punishment_field(name: str, fee: int) -> Field:
    """A field charging `fee`."""
    if fee < 0:
        raise ValueError("Fee cannot be negative")
    return Field(name, FieldType.PUNISHMENT, amount=fee)


def deposit_field(name: str, deposit_fee: int) -> Field:
    """A field collecting `deposit_fee` from passers-by and paying the pool out on landing."""
    if deposit_fee < 0:
        raise ValueError("Deposit fee cannot be negative")
    return Field(name, FieldType.DEPOSIT, amount=deposit_fee)


def aquarium_field(name: str, turns: int) -> Field:
    """A field holding the player for `turns` turns."""
    if turns < 0:
        raise ValueError("Waiting time cannot be negative")
    return Field(name, FieldType.AQUARIUM, amount=turns)
