"""Realtime WebSocket gateway.

One socket is one Connection. The first useful frame is ``auth``; until then
the socket may join channels (and receive), but not send. Outbound events are
drained from the connection's outbox by a single writer task, and direct
replies share its lock, so frames never interleave.
"""

import asyncio
import logging
from typing import Callable

from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from oxytalk.config import MessagingSettings
from oxytalk.domain.error import DomainError
from oxytalk.domain.model import Connection, PresenceChanged
from oxytalk.domain.service import IdentityService, MessageRouter, PresenceRegistry
from oxytalk.domain.value import ChatId
from oxytalk.interface.error import ProtocolError, describe_error
from oxytalk.interface.ws.protocol import (
    AuthData,
    ChatRef,
    SendMessageData,
    TypingData,
    WsInbound,
    WsOutbound,
    auth_error,
    auth_ok,
    encode_event,
    error_frame,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])

# Application-defined close code for a rejected token
CLOSE_UNAUTHENTICATED = 4401


class RealtimeSession:
    """Serves one WebSocket for its whole lifetime."""

    def __init__(
        self,
        websocket: WebSocket,
        container: AsyncContainer,
        presence: PresenceRegistry,
        message_router: MessageRouter,
        settings: MessagingSettings,
    ) -> None:
        self.websocket = websocket
        self.container = container
        self.presence = presence
        self.message_router = message_router
        self.connection = Connection(outbox_size=settings.outbox_size)
        self._send_lock = asyncio.Lock()
        self._unsubscribe: Callable[[], None] | None = None

    async def run(self) -> None:
        writer = asyncio.create_task(self._write())
        try:
            while True:
                raw = await self.websocket.receive_text()
                if not await self._handle(raw):
                    break
        except WebSocketDisconnect:
            pass
        finally:
            writer.cancel()
            self._cleanup()
            logger.info(f"Realtime session ended: {self.connection!r}")

    async def _send(self, frame: WsOutbound) -> None:
        async with self._send_lock:
            await self.websocket.send_json(frame.model_dump())

    async def _write(self) -> None:
        while True:
            event = await self.connection.next_event()
            try:
                await self._send(encode_event(event))
            except (WebSocketDisconnect, RuntimeError):
                # Socket already gone, the reader side cleans up
                return

    async def _handle(self, raw: str) -> bool:
        """Dispatch one inbound frame. Returns False to end the session."""
        try:
            frame = WsInbound.model_validate_json(raw)
            handler = self._handlers().get(frame.type)
            if handler is None:
                raise ProtocolError(f"Unknown frame type: {frame.type}")
            return await handler(frame.data)
        except ValidationError as e:
            await self._send(
                error_frame("bad_request", f"Malformed frame: {e.error_count()} error(s)")
            )
        except ProtocolError as e:
            await self._send(error_frame("bad_request", str(e)))
        except DomainError as e:
            _, code, detail = describe_error(e)
            await self._send(error_frame(code, detail))
        return True

    def _handlers(self):
        return {
            "auth": self._on_auth,
            "join_chat": self._on_join,
            "leave_chat": self._on_leave,
            "typing": self._on_typing,
            "send_message": self._on_send,
        }

    async def _on_auth(self, data: dict) -> bool:
        payload = AuthData.model_validate(data)
        if self.connection.is_authenticated:
            raise ProtocolError("Already authenticated")

        async with self.container() as request_container:
            identity_service = await request_container.get(IdentityService)
            identity = await identity_service.resolve_by_token(payload.token)

        if identity is None:
            await self._send(auth_error("Invalid token"))
            await self.websocket.close(code=CLOSE_UNAUTHENTICATED)
            return False

        self.connection.authenticate(identity)
        await self._send(auth_ok(identity))
        self._unsubscribe = self.presence.subscribe(self._on_presence)
        self.presence.connection_opened(identity.id, self.connection.id)
        logger.info(f"Realtime session authenticated: {self.connection!r}")
        return True

    async def _on_join(self, data: dict) -> bool:
        payload = ChatRef.model_validate(data)
        self.message_router.join_channel(self.connection, ChatId(payload.chat_id))
        return True

    async def _on_leave(self, data: dict) -> bool:
        payload = ChatRef.model_validate(data)
        self.message_router.leave_channel(self.connection, ChatId(payload.chat_id))
        return True

    async def _on_typing(self, data: dict) -> bool:
        payload = TypingData.model_validate(data)
        self.message_router.typing(
            self.connection, ChatId(payload.chat_id), payload.is_typing
        )
        return True

    async def _on_send(self, data: dict) -> bool:
        payload = SendMessageData.model_validate(data)
        self.message_router.send(
            self.connection,
            ChatId(payload.chat_id),
            payload.text,
            ephemeral=payload.ephemeral,
        )
        return True

    def _on_presence(self, event: PresenceChanged) -> None:
        # Every authenticated socket, the identity's own included
        if self.connection.is_authenticated:
            self.connection.push(event)

    def _cleanup(self) -> None:
        self.message_router.disconnect(self.connection)
        if self._unsubscribe is not None:
            self._unsubscribe()
        if self.connection.identity is not None:
            self.presence.connection_closed(
                self.connection.identity.id, self.connection.id
            )
        self.connection.close()


@router.websocket("/ws")
async def realtime(websocket: WebSocket) -> None:
    """Realtime endpoint: presence, typing and live messages."""
    container: AsyncContainer = websocket.app.state.dishka_container
    presence = await container.get(PresenceRegistry)
    message_router = await container.get(MessageRouter)
    settings = await container.get(MessagingSettings)

    await websocket.accept()
    session = RealtimeSession(websocket, container, presence, message_router, settings)
    await session.run()
