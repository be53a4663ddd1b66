"""Realtime frame models.

Every frame is ``{"type": ..., "data": {...}}``; payload keys are camelCase.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from oxytalk.application.usecase.chat import MessageItem
from oxytalk.domain.model import (
    DeliveryWarning,
    Identity,
    NewMessage,
    PresenceChanged,
    RealtimeEvent,
    TypingSignal,
)


class WsInbound(BaseModel):
    """Client -> Server."""

    type: str  # auth | join_chat | leave_chat | typing | send_message
    data: dict[str, Any] = {}


class WsOutbound(BaseModel):
    """Server -> Client."""

    type: str  # auth_ok | auth_error | presence | new_message | typing | warning | error
    data: dict[str, Any] = {}


class WirePayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# Inbound payloads


class AuthData(WirePayload):
    token: str


class ChatRef(WirePayload):
    chat_id: str


class TypingData(WirePayload):
    chat_id: str
    is_typing: bool = True


class SendMessageData(WirePayload):
    chat_id: str
    text: str
    ephemeral: bool = False


# Outbound payloads


class IdentityData(WirePayload):
    identity_id: str
    display_name: str
    avatar_url: str | None = None


class PresenceData(WirePayload):
    identity_id: str
    online: bool


class TypingEventData(WirePayload):
    chat_id: str
    identity_id: str
    is_typing: bool


class WarningData(WirePayload):
    code: str
    message_id: str
    chat_id: str


class ErrorData(WirePayload):
    code: str
    detail: str


def auth_ok(identity: Identity) -> WsOutbound:
    data = IdentityData(
        identity_id=identity.id,
        display_name=identity.display_name,
        avatar_url=identity.avatar_url,
    )
    return WsOutbound(type="auth_ok", data=data.dump())


def auth_error(detail: str) -> WsOutbound:
    return WsOutbound(
        type="auth_error", data=ErrorData(code="unauthenticated", detail=detail).dump()
    )


def error_frame(code: str, detail: str) -> WsOutbound:
    return WsOutbound(type="error", data=ErrorData(code=code, detail=detail).dump())


def encode_event(event: RealtimeEvent) -> WsOutbound:
    """Encode a queued realtime event as an outbound frame."""
    if isinstance(event, NewMessage):
        return WsOutbound(
            type="new_message",
            data=MessageItem.from_message(event.message).model_dump(
                mode="json", by_alias=True
            ),
        )
    if isinstance(event, PresenceChanged):
        data = PresenceData(identity_id=event.identity_id, online=event.online)
        return WsOutbound(type="presence", data=data.dump())
    if isinstance(event, TypingSignal):
        data = TypingEventData(
            chat_id=str(event.chat_id),
            identity_id=event.identity_id,
            is_typing=event.is_typing,
        )
        return WsOutbound(type="typing", data=data.dump())
    if isinstance(event, DeliveryWarning):
        data = WarningData(
            code=event.code,
            message_id=str(event.message_id),
            chat_id=str(event.chat_id),
        )
        return WsOutbound(type="warning", data=data.dump())
    raise TypeError(f"Unknown realtime event: {type(event).__name__}")
