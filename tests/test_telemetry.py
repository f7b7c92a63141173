from __future__ import annotations

import json
from pathlib import Path

from slotduel.services.telemetry import TelemetryService


def test_log_appends_json_lines(tmp_path: Path) -> None:
    svc = TelemetryService(tmp_path / "nested" / "telemetry.jsonl")
    svc.log("MATCH_STARTED", {"health": 10})
    svc.log("ROUND_ENDED", {"round": 1})

    lines = svc.path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["type"] == "MATCH_STARTED"
    assert first["payload"] == {"health": 10}
    assert first["ts"].endswith("+00:00")


def test_log_events_strips_type(tmp_path: Path) -> None:
    svc = TelemetryService(tmp_path / "t.jsonl")
    n = svc.log_events([{"type": "CARD_DRAWN", "handle": 3}, {"handle": 4}])
    assert n == 2
    recs = [json.loads(x) for x in svc.path.read_text(encoding="utf-8").splitlines()]
    assert recs[0] == {"ts": recs[0]["ts"], "type": "CARD_DRAWN", "payload": {"handle": 3}}
    assert recs[1]["type"] == "UNKNOWN"
