"""Transports that carry messages over bot protocols."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .message import Message


class ProtocolEventKind(Enum):
    """What happened on a transport."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    MESSAGE_RECEIVED = "message_received"


@dataclass(frozen=True)
class ProtocolEvent:
    """A transport event; received-message events carry the message."""

    kind: ProtocolEventKind
    message: Message | None = None

    def __post_init__(self) -> None:
        carries_message = self.kind is ProtocolEventKind.MESSAGE_RECEIVED
        if carries_message != (self.message is not None):
            raise ValueError("only message_received events carry a message")


class TransportError(Exception):
    """Raised when a transport operation fails."""


class ProtocolTransport(ABC):
    """A connection that can send messages."""

    @abstractmethod
    def name(self) -> str:
        """Transport name."""

    @abstractmethod
    def connect(self) -> None:
        """Open the connection."""

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection."""

    @abstractmethod
    def send_message(self, message: Message) -> None:
        """Send a message; raise TransportError on failure."""


class OneBotTransport(ProtocolTransport):
    """A OneBot transport that counts what it sends."""

    def __init__(self) -> None:
        self._connected = False
        self._outbox_size = 0

    @property
    def connected(self) -> bool:
        """Whether the transport is connected."""
        return self._connected

    @property
    def outbox_size(self) -> int:
        """Number of messages sent so far."""
        return self._outbox_size

    def name(self) -> str:
        return "onebot"

    def connect(self) -> None:
        self._connected = True

    def disconnect(self) -> None:
        self._connected = False

    def send_message(self, message: Message) -> None:
        if not self._connected:
            raise TransportError("transport is not connected")
        self._outbox_size += 1