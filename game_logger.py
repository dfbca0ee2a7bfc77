"""
JSONL logger for Gruba Ryba game events.

Writes the engine's event log to a JSONL file, one event per line.
"""

import json
from datetime import datetime
from typing import Any, Optional

from grubaryba.game import GameEngine


class GameLogger:
    """Logger that writes game events to a JSONL file."""

    def __init__(self, log_file: Optional[str] = None):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"grubaryba_game_{timestamp}.jsonl"

        self.log_file = log_file
        self.event_count = 0
        self._engine_last_idx = 0  # last flushed index from engine's EventLog

        # Create/clear log file
        with open(self.log_file, "w"):
            pass

    def log_event(self, event_type: str, **kwargs: Any) -> None:
        """
        Log a game event to the JSONL file.

        Args:
            event_type: Type of event (e.g., "round_start", "purchase")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")

        self.event_count += 1

    def flush_engine_events(self, engine: GameEngine) -> int:
        """Write engine events not flushed yet. Returns the number of events written."""
        events = engine.event_log.events
        if self._engine_last_idx >= len(events):
            return 0

        wrote = 0
        for event in events[self._engine_last_idx :]:
            payload = dict(event.details)
            if event.player_id is not None:
                payload["player_id"] = event.player_id
                payload["player_name"] = engine.players[event.player_id].name
            self.log_event(event.event_type.value, **payload)
            wrote += 1

        self._engine_last_idx = len(events)
        return wrote

    def log_final_standings(self, engine: GameEngine) -> None:
        """Log one snapshot per player after the match."""
        for player in engine.players:
            self.log_event(
                "player_state",
                player_id=player.player_id,
                player_name=player.name,
                cash=player.cash,
                position=player.position,
                position_name=engine.board.get_field(player.position).name,
                properties=list(player.properties),
                is_bankrupt=player.is_bankrupt,
            )
