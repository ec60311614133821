import pytest

from xenochat.message import ContentKind, Message, MessageContent, Platform
from xenochat.planner import NextAction, Planner


def _text(value):
    return Message.text("m", Platform.QQ, "u", "r", value)


@pytest.mark.parametrize("value", ["", "   ", "\n\t"])
def test_blank_text_is_skipped(value):
    assert Planner().decide(_text(value)) is NextAction.SKIP


@pytest.mark.parametrize("value", ["how are you?", "\u4f60\u597d\uff1f"])
def test_questions_get_a_reply(value):
    assert Planner().decide(_text(value)) is NextAction.REPLY


def test_statement_asks_for_clarification():
    assert Planner().decide(_text("hello")) is NextAction.ASK_FOR_CLARIFICATION


def test_media_asks_for_clarification_even_with_question_mark():
    message = Message(
        "m",
        Platform.QQ,
        "u",
        "r",
        MessageContent(ContentKind.IMAGE_URL, "https://example.com/a.png?x=1"),
    )
    assert Planner().decide(message) is NextAction.ASK_FOR_CLARIFICATION