"""Decides how to react to an incoming message."""

from __future__ import annotations

from enum import Enum

from .message import ContentKind, Message


class NextAction(Enum):
    """What the assistant should do with a message."""

    REPLY = "reply"
    ASK_FOR_CLARIFICATION = "ask_for_clarification"
    SKIP = "skip"


class Planner:
    """A simple rule-based planner."""

    def decide(self, message: Message) -> NextAction:
        """Skip blank text, reply to questions, otherwise ask for clarification."""
        content = message.content
        if content.kind is ContentKind.TEXT:
            if not content.value.strip():
                return NextAction.SKIP
            if "?" in content.value or "\uff1f" in content.value:
                return NextAction.REPLY
        return NextAction.ASK_FOR_CLARIFICATION