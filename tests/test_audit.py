import json
import time

from xenochat.audit import AuditEvent


def test_renders_json_line():
    event = AuditEvent("system", "config.update", "api.keys", "success")
    encoded = event.to_json_line()
    assert '"action":"config.update"' in encoded


def test_json_line_parses_back():
    event = AuditEvent("system", "config.update", "api.keys", "success", timestamp_ms=42)
    decoded = json.loads(event.to_json_line())
    assert decoded == {
        "timestamp_ms": 42,
        "actor": "system",
        "action": "config.update",
        "resource": "api.keys",
        "outcome": "success",
    }


def test_escapes_special_characters():
    event = AuditEvent('a"b', "x\\y", "line1\nline2", "r\rs", timestamp_ms=1)
    line = event.to_json_line()
    assert "\n" not in line
    decoded = json.loads(line)
    assert decoded["actor"] == 'a"b'
    assert decoded["action"] == "x\\y"
    assert decoded["resource"] == "line1\nline2"
    assert decoded["outcome"] == "r\rs"


def test_timestamp_defaults_to_now():
    before = time.time_ns() // 1_000_000
    event = AuditEvent("system", "login", "session", "success")
    after = time.time_ns() // 1_000_000
    assert before <= event.timestamp_ms <= after