"""Chat messages exchanged between platforms and the core."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum


class Platform(Enum):
    """Chat platforms a message can originate from."""

    DISCORD = "discord"
    GOOGLE_CHAT = "googlechat"
    IMESSAGE = "imessage"
    INSTAGRAM = "instagram"
    KAKAOTALK = "kakaotalk"
    LINE = "line"
    MESSENGER = "messenger"
    QQ = "qq"
    SIGNAL = "signal"
    SKYPE = "skype"
    SLACK = "slack"
    TEAMS = "teams"
    TELEGRAM = "telegram"
    VIBER = "viber"
    WECHAT = "wechat"
    WHATSAPP = "whatsapp"
    ZOOM = "zoom"


class ContentKind(Enum):
    """The kind of payload a message carries."""

    TEXT = "text"
    IMAGE_URL = "image_url"
    AUDIO_URL = "audio_url"
    FILE_URL = "file_url"


@dataclass(frozen=True)
class MessageContent:
    """A message payload: plain text or a link to media."""

    kind: ContentKind
    value: str


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Message:
    """A single chat message."""

    id: str
    platform: Platform
    sender_id: str
    room_id: str
    content: MessageContent
    timestamp_ms: int = field(default_factory=_now_ms)

    @classmethod
    def text(
        cls,
        id: str,
        platform: Platform,
        sender_id: str,
        room_id: str,
        text: str,
    ) -> Message:
        """Build a text message stamped with the current time."""
        return cls(
            id=id,
            platform=platform,
            sender_id=sender_id,
            room_id=room_id,
            content=MessageContent(ContentKind.TEXT, text),
        )