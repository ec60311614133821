"""Structured audit events rendered as JSON lines."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _escape_json(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


@dataclass(frozen=True)
class AuditEvent:
    """Who did what to which resource, with what outcome, and when."""

    actor: str
    action: str
    resource: str
    outcome: str
    timestamp_ms: int = field(default_factory=_now_ms)

    def to_json_line(self) -> str:
        """Render the event as a single-line JSON object."""
        return (
            f'{{"timestamp_ms":{self.timestamp_ms},'
            f'"actor":"{_escape_json(self.actor)}",'
            f'"action":"{_escape_json(self.action)}",'
            f'"resource":"{_escape_json(self.resource)}",'
            f'"outcome":"{_escape_json(self.outcome)}"}}'
        )