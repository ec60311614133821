import pytest

from xenochat.message import Message, Platform
from xenochat.protocol import (
    OneBotTransport,
    ProtocolEvent,
    ProtocolEventKind,
    TransportError,
)


def _message() -> Message:
    return Message.text("m1", Platform.QQ, "u1", "room", "hello")


def test_name_is_onebot():
    assert OneBotTransport().name() == "onebot"


def test_send_requires_connection():
    transport = OneBotTransport()
    with pytest.raises(TransportError, match="transport is not connected"):
        transport.send_message(_message())
    assert transport.outbox_size == 0


def test_send_counts_messages_when_connected():
    transport = OneBotTransport()
    transport.connect()
    transport.send_message(_message())
    transport.send_message(_message())
    assert transport.connected
    assert transport.outbox_size == 2


def test_disconnect_stops_sending_but_keeps_count():
    transport = OneBotTransport()
    transport.connect()
    transport.send_message(_message())
    transport.disconnect()
    assert not transport.connected
    with pytest.raises(TransportError):
        transport.send_message(_message())
    assert transport.outbox_size == 1


def test_message_event_carries_message():
    message = _message()
    event = ProtocolEvent(ProtocolEventKind.MESSAGE_RECEIVED, message)
    assert event.message == message
    assert event == ProtocolEvent(ProtocolEventKind.MESSAGE_RECEIVED, message)


def test_events_reject_mismatched_payload():
    with pytest.raises(ValueError):
        ProtocolEvent(ProtocolEventKind.MESSAGE_RECEIVED)
    with pytest.raises(ValueError):
        ProtocolEvent(ProtocolEventKind.CONNECTED, _message())
    assert ProtocolEvent(ProtocolEventKind.DISCONNECTED).message is None