"""Adapters for the widely used chat platforms, and the default adapter set."""

from __future__ import annotations

from .adapter import BasicAdapter
from .message import Platform
from .regional import (
    KakaoTalkAdapter,
    LineAdapter,
    QqAdapter,
    ViberAdapter,
    WeChatAdapter,
)

_DEFAULT_CAPACITY = 4096


class DiscordAdapter(BasicAdapter):
    """Discord adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.DISCORD, _DEFAULT_CAPACITY, False)


class GoogleChatAdapter(BasicAdapter):
    """Google Chat adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.GOOGLE_CHAT, _DEFAULT_CAPACITY, False)


class IMessageAdapter(BasicAdapter):
    """iMessage adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.IMESSAGE, _DEFAULT_CAPACITY, False)


class InstagramAdapter(BasicAdapter):
    """Instagram adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.INSTAGRAM, _DEFAULT_CAPACITY, False)


class MessengerAdapter(BasicAdapter):
    """Messenger adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.MESSENGER, _DEFAULT_CAPACITY, False)


class SignalAdapter(BasicAdapter):
    """Signal adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.SIGNAL, _DEFAULT_CAPACITY, False)


class SkypeAdapter(BasicAdapter):
    """Skype adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.SKYPE, _DEFAULT_CAPACITY, False)


class SlackAdapter(BasicAdapter):
    """Slack adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.SLACK, _DEFAULT_CAPACITY, False)


class TeamsAdapter(BasicAdapter):
    """Teams adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.TEAMS, _DEFAULT_CAPACITY, False)


class TelegramAdapter(BasicAdapter):
    """Telegram adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.TELEGRAM, _DEFAULT_CAPACITY, False)


class WhatsAppAdapter(BasicAdapter):
    """WhatsApp adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.WHATSAPP, _DEFAULT_CAPACITY, False)


class ZoomAdapter(BasicAdapter):
    """Zoom adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.ZOOM, _DEFAULT_CAPACITY, False)


def default_adapters() -> list[BasicAdapter]:
    """Fresh adapters for every supported platform, in registration order."""
    return [
        TelegramAdapter(),
        DiscordAdapter(),
        SlackAdapter(),
        TeamsAdapter(),
        GoogleChatAdapter(),
        IMessageAdapter(),
        InstagramAdapter(),
        KakaoTalkAdapter(),
        LineAdapter(),
        MessengerAdapter(),
        QqAdapter(),
        SignalAdapter(),
        SkypeAdapter(),
        ViberAdapter(),
        WeChatAdapter(),
        WhatsAppAdapter(),
        ZoomAdapter(),
    ]