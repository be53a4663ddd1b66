"""Realtime events pushed to live connections."""

from typing import Literal, Union

from oxytalk.domain.model.common import DomainModel
from oxytalk.domain.model.message import Message
from oxytalk.domain.value import ChatId, IdentityId, MessageId


class PresenceChanged(DomainModel):
    """An identity went online (first connection) or offline (last one closed)."""

    identity_id: IdentityId
    online: bool


class NewMessage(DomainModel):
    """A message was sent to a channel the connection joined."""

    message: Message


class TypingSignal(DomainModel):
    """Advisory typing indicator from another channel member."""

    chat_id: ChatId
    identity_id: IdentityId
    is_typing: bool


class DeliveryWarning(DomainModel):
    """Delivered live, but the durable append failed."""

    code: Literal["persistence_unavailable"] = "persistence_unavailable"
    message_id: MessageId
    chat_id: ChatId


RealtimeEvent = Union[PresenceChanged, NewMessage, TypingSignal, DeliveryWarning]
