"""Thread-safe runtime counters."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Counter values at one moment."""

    messages_inbound: int = 0
    messages_outbound: int = 0
    dropped_messages: int = 0


class RuntimeMetrics:
    """Message counters that may be bumped from several threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._inbound = 0
        self._outbound = 0
        self._dropped = 0

    def increment_inbound(self) -> None:
        """Count one inbound message."""
        with self._lock:
            self._inbound += 1

    def increment_outbound(self) -> None:
        """Count one outbound message."""
        with self._lock:
            self._outbound += 1

    def increment_dropped(self) -> None:
        """Count one dropped message."""
        with self._lock:
            self._dropped += 1

    def snapshot(self) -> RuntimeSnapshot:
        """Current counter values."""
        with self._lock:
            return RuntimeSnapshot(self._inbound, self._outbound, self._dropped)