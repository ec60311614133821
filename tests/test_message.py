import time

from xenochat.message import ContentKind, Message, MessageContent, Platform


def test_text_builds_text_content():
    message = Message.text("m1", Platform.SLACK, "alice", "general", "hi there")
    assert message.content == MessageContent(ContentKind.TEXT, "hi there")
    assert message.id == "m1"
    assert message.platform is Platform.SLACK
    assert message.sender_id == "alice"
    assert message.room_id == "general"


def test_text_timestamp_is_current_milliseconds():
    before = time.time_ns() // 1_000_000
    message = Message.text("m1", Platform.ZOOM, "a", "r", "x")
    after = time.time_ns() // 1_000_000
    assert before <= message.timestamp_ms <= after


def test_messages_with_same_fields_compare_equal():
    content = MessageContent(ContentKind.IMAGE_URL, "https://example.com/a.png")
    first = Message("m", Platform.LINE, "s", "r", content, timestamp_ms=5)
    second = Message("m", Platform.LINE, "s", "r", content, timestamp_ms=5)
    assert first == second


def test_platform_ids_are_unique():
    values = [platform.value for platform in Platform]
    assert len(values) == len(set(values))
    assert Platform("googlechat") is Platform.GOOGLE_CHAT