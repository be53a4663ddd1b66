"""Domain model entities for OxyTalk."""

from oxytalk.domain.model.connection import Connection
from oxytalk.domain.model.contact import ContactEdge
from oxytalk.domain.model.event import (
    DeliveryWarning,
    NewMessage,
    PresenceChanged,
    RealtimeEvent,
    TypingSignal,
)
from oxytalk.domain.model.identity import Identity
from oxytalk.domain.model.invite import Invite
from oxytalk.domain.model.message import Message

__all__ = [
    "Connection",
    "ContactEdge",
    "DeliveryWarning",
    "Identity",
    "Invite",
    "Message",
    "NewMessage",
    "PresenceChanged",
    "RealtimeEvent",
    "TypingSignal",
]
