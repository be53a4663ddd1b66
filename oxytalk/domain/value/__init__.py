"""Domain value objects for OxyTalk."""

from oxytalk.domain.value.chat import ChatId, derive_chat_id
from oxytalk.domain.value.identifiers import (
    ConnectionId,
    IdentityId,
    InviteId,
    MessageId,
)
from oxytalk.domain.value.types import InviteAction, InviteStatus

__all__ = [
    # Identifiers
    "ConnectionId",
    "IdentityId",
    "InviteId",
    "MessageId",
    # Chat channels
    "ChatId",
    "derive_chat_id",
    # Types
    "InviteAction",
    "InviteStatus",
]
