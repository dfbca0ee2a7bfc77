"""
Game event log.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    ROUND_START = "round_start"
    WAIT = "wait"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    PASS_BY = "pass_by"

    PURCHASE = "purchase"
    PURCHASE_DECLINED = "purchase_declined"
    PURCHASE_ABANDONED = "purchase_abandoned"
    SALE = "sale"

    COMMISSION_PAYMENT = "commission_payment"
    REWARD = "reward"
    FEE_PAYMENT = "fee_payment"
    DEPOSIT_PAYMENT = "deposit_payment"
    DEPOSIT_COLLECT = "deposit_collect"

    BANKRUPTCY = "bankruptcy"
    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player_id: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = f"P{self.player_id}" if self.player_id is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, player_id: Optional[int] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, player_id, details))

    def get_events(self, event_type: Optional[EventType] = None) -> List[GameEvent]:
        """Get all logged events, optionally only those of one type."""
        if event_type is None:
            return self.events.copy()
        return [e for e in self.events if e.event_type == event_type]

    def get_recent_events(self, count: int = 10) -> List[GameEvent]:
        """Get the most recent N events."""
        return self.events[-count:]

    def clear(self) -> None:
        """Clear the event log."""
        self.events.clear()
