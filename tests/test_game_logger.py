"""
Tests for the JSONL game logger.
"""

import json

from game_logger import GameLogger
from grubaryba import ComputerLevel, ScriptedDie, create_game


def test_flush_writes_every_engine_event(tmp_path):
    engine = create_game(
        computer_levels=[ComputerLevel.SMARTASS, ComputerLevel.DUMB],
        die=ScriptedDie([1, 2]),
    )
    engine.play(3)
    log_file = tmp_path / "game.jsonl"
    logger = GameLogger(str(log_file))

    wrote = logger.flush_engine_events(engine)

    lines = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert wrote == len(engine.event_log.events) == len(lines)
    assert lines[0]["event_type"] == "game_start"
    assert lines[-1]["event_type"] == "game_end"
    purchase = next(e for e in lines if e["event_type"] == "purchase")
    assert purchase["player_name"] == "Player1"
    assert purchase["property"] == "Anemonia"

    # Nothing new to flush
    assert logger.flush_engine_events(engine) == 0


def test_final_standings(tmp_path):
    engine = create_game(
        computer_levels=[ComputerLevel.DUMB, ComputerLevel.DUMB],
        die=ScriptedDie([2]),
    )
    engine.play(1)
    log_file = tmp_path / "game.jsonl"
    logger = GameLogger(str(log_file))

    logger.log_final_standings(engine)

    lines = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert [e["player_name"] for e in lines] == ["Player1", "Player2"]
    assert all(e["position_name"] == "Wyspa" for e in lines)
    assert [e["event_id"] for e in lines] == [0, 1]
