"""Adapters for KakaoTalk, LINE, QQ, Viber and WeChat."""

from __future__ import annotations

from .adapter import BasicAdapter
from .message import Platform

_DEFAULT_CAPACITY = 4096


class KakaoTalkAdapter(BasicAdapter):
    """KakaoTalk adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.KAKAOTALK, _DEFAULT_CAPACITY, False)


class LineAdapter(BasicAdapter):
    """LINE adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.LINE, _DEFAULT_CAPACITY, False)


class QqAdapter(BasicAdapter):
    """QQ adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.QQ, _DEFAULT_CAPACITY, False)


class ViberAdapter(BasicAdapter):
    """Viber adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.VIBER, _DEFAULT_CAPACITY, False)


class WeChatAdapter(BasicAdapter):
    """WeChat adapter with a blocking queue of 4096 messages."""

    def __init__(self) -> None:
        super().__init__(Platform.WECHAT, _DEFAULT_CAPACITY, False)