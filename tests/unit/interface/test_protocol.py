"""Unit tests for realtime frame encoding."""

from uuid import uuid4

from oxytalk.domain.model import DeliveryWarning, PresenceChanged, TypingSignal
from oxytalk.domain.value import IdentityId, MessageId, derive_chat_id
from oxytalk.interface.ws.protocol import SendMessageData, encode_event

CHAT = derive_chat_id(IdentityId("alice"), IdentityId("bob"))


def test_presence_frame():
    frame = encode_event(PresenceChanged(identity_id=IdentityId("bob"), online=False))

    assert frame.model_dump() == {
        "type": "presence",
        "data": {"identityId": "bob", "online": False},
    }


def test_typing_frame():
    event = TypingSignal(chat_id=CHAT, identity_id=IdentityId("alice"), is_typing=True)

    frame = encode_event(event)

    assert frame.type == "typing"
    assert frame.data == {"chatId": "chat:alice:bob", "identityId": "alice", "isTyping": True}


def test_warning_frame():
    message_id = MessageId(uuid4())

    frame = encode_event(DeliveryWarning(message_id=message_id, chat_id=CHAT))

    assert frame.type == "warning"
    assert frame.data == {
        "code": "persistence_unavailable",
        "messageId": str(message_id),
        "chatId": "chat:alice:bob",
    }


def test_send_message_payload_defaults():
    """Messages are durable unless marked ephemeral."""
    payload = SendMessageData.model_validate({"chatId": "chat:a:b", "text": "hi"})

    assert payload.ephemeral is False
    assert payload.chat_id == "chat:a:b"
