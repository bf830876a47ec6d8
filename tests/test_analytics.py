# tests/test_analytics.py
import json

from services.analytics import log_event, mutation_event
from services.store import Vehicle


def test_disabled_log_writes_nothing(tmp_path):
    path = tmp_path / "events.jsonl"
    assert log_event({"type": "x"}, path=str(path), enabled=False) is False
    assert not path.exists()

def test_enabled_log_appends_json_lines(tmp_path):
    path = tmp_path / "nested" / "events.jsonl"
    log_event({"type": "add_vehicle", "name": "E36 M3"}, path=str(path), enabled=True)
    log_event({"type": "add_manufacturer", "name": "Mitsubishi Motors"}, path=str(path), enabled=True)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["name"] == "E36 M3"
    assert first["ts_iso"].endswith("Z")

def test_mutation_event_flattens_record():
    event = mutation_event("add_vehicle", Vehicle(id=11, name="Test Car", manufacturer_id=1))
    assert event == {"type": "add_vehicle", "id": 11, "name": "Test Car", "manufacturer_id": 1}
