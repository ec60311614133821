"""Platform adapters: bounded message queues and authorized export import."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .message import Message, Platform

T = TypeVar("T")


@dataclass(frozen=True)
class AdapterDiagnostics:
    """A snapshot of an adapter's queue and import state."""

    platform: Platform
    queue_depth: int
    dropped_messages: int
    import_records: int


class QueueFullError(Exception):
    """Raised when an item cannot be queued because the queue is full."""

    def __init__(self, item: Any, message: str = "queue is full") -> None:
        super().__init__(message)
        self.item = item


class BoundedQueue(Generic[T]):
    """A FIFO queue with a fixed capacity of at least one.

    When full it either silently drops new items, counting them, or
    rejects them with :class:`QueueFullError`.
    """

    def __init__(self, capacity: int, drop_when_full: bool) -> None:
        self._capacity = max(capacity, 1)
        self._drop_when_full = drop_when_full
        self._dropped = 0
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        """Append an item, dropping or rejecting it if the queue is full."""
        if len(self._items) < self._capacity:
            self._items.append(item)
            return
        if self._drop_when_full:
            self._dropped += 1
            return
        raise QueueFullError(item)

    def pop(self) -> T | None:
        """Remove and return the oldest item, or None when empty."""
        return self._items.popleft() if self._items else None

    def depth(self) -> int:
        """Number of queued items."""
        return len(self._items)

    def dropped(self) -> int:
        """Number of items dropped because the queue was full."""
        return self._dropped

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class ImportedRecord:
    """One line of an authorized chat export."""

    sender_id: str
    room_id: str
    text: str


class ExportFormatError(ValueError):
    """Raised when an export contains a malformed line."""


class PlatformAdapter(ABC):
    """Moves messages between a chat platform and the core."""

    @abstractmethod
    def platform(self) -> Platform:
        """The platform this adapter serves."""

    @abstractmethod
    def ingest(self, message: Message) -> None:
        """Queue a message; raise if it cannot be accepted."""

    @abstractmethod
    def next_outbound(self) -> Message | None:
        """Take the next queued message, or None."""

    @abstractmethod
    def diagnostics(self) -> AdapterDiagnostics:
        """Current queue and import state."""


class ImportContract(ABC):
    """Importing messages from user-authorized exports."""

    @abstractmethod
    def discover_sources(self) -> list[str]:
        """Locations where exports may be found."""

    @abstractmethod
    def parse_authorized_export(self, raw: str) -> list[ImportedRecord]:
        """Parse export text into records; raise on malformed input."""

    @abstractmethod
    def normalize_messages(
        self, records: Iterable[ImportedRecord], platform: Platform
    ) -> list[Message]:
        """Turn records into messages for the given platform."""

    @abstractmethod
    def checkpoint(self) -> str:
        """A marker describing import progress."""

    @abstractmethod
    def diagnostics_note(self) -> str:
        """A short human-readable status line."""


class BasicAdapter(PlatformAdapter, ImportContract):
    """A queue-backed adapter that reads ``sender|room|text`` exports."""

    def __init__(self, platform: Platform, capacity: int, drop_when_full: bool) -> None:
        self._platform = platform
        self._queue: BoundedQueue[Message] = BoundedQueue(capacity, drop_when_full)
        self._imported_records = 0

    def ingest_imported_records(self, records: Iterable[ImportedRecord]) -> None:
        """Queue records as text messages; records that do not fit are lost."""
        for record in records:
            message = Message.text(
                f"import-{self.platform_id()}-{self._imported_records}",
                self._platform,
                record.sender_id,
                record.room_id,
                record.text,
            )
            try:
                self.ingest(message)
            except QueueFullError:
                pass
            self._imported_records += 1

    def platform_id(self) -> str:
        """The platform's short lower-case identifier."""
        return self._platform.value

    def platform(self) -> Platform:
        return self._platform

    def ingest(self, message: Message) -> None:
        try:
            self._queue.push(message)
        except QueueFullError as error:
            raise QueueFullError(message, "adapter queue is full") from error

    def next_outbound(self) -> Message | None:
        return self._queue.pop()

    def diagnostics(self) -> AdapterDiagnostics:
        return AdapterDiagnostics(
            platform=self._platform,
            queue_depth=self._queue.depth(),
            dropped_messages=self._queue.dropped(),
            import_records=self._imported_records,
        )

    def discover_sources(self) -> list[str]:
        return [f"exports/{self.platform_id()}"]

    def parse_authorized_export(self, raw: str) -> list[ImportedRecord]:
        records = []
        for line_number, line in enumerate(raw.split("\n"), start=1):
            clean = line.strip()
            if not clean:
                continue
            parts = clean.split("|", 2)
            if len(parts) != 3:
                raise ExportFormatError(f"invalid export line {line_number}: '{clean}'")
            sender_id, room_id, text = (part.strip() for part in parts)
            records.append(ImportedRecord(sender_id, room_id, text))
        return records

    def normalize_messages(
        self, records: Iterable[ImportedRecord], platform: Platform
    ) -> list[Message]:
        return [
            Message.text(
                f"normalized-{self.platform_id()}-{index}",
                platform,
                record.sender_id,
                record.room_id,
                record.text,
            )
            for index, record in enumerate(records)
        ]

    def checkpoint(self) -> str:
        return f"{self.platform_id()}:{self._imported_records}"

    def diagnostics_note(self) -> str:
        return f"platform={self.platform_id()} queue_depth={self._queue.depth()}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(platform={self._platform!r}, "
            f"queue_depth={self._queue.depth()}, imported={self._imported_records})"
        )