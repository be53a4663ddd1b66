"""Message router.

Fans messages out to the connections joined to a channel and writes the
non-ephemeral ones through to the channel's durable log.

Live delivery never waits on storage. Durable appends run in the background,
chained per channel so the log keeps delivery order, and a failed append is
reported to the sender as a warning instead of retracting the delivery.
"""

import asyncio
from uuid import uuid4

import logfire

from oxytalk.config import MessagingSettings
from oxytalk.domain.error import (
    EmptyMessageError,
    ForbiddenError,
    PersistenceUnavailableError,
    UnauthenticatedError,
)
from oxytalk.domain.model import (
    Connection,
    DeliveryWarning,
    Message,
    NewMessage,
    TypingSignal,
)
from oxytalk.domain.model.common import utcnow
from oxytalk.domain.repository import MessageRepository
from oxytalk.domain.value import ChatId, IdentityId, MessageId

from .base import Service


class MessageRouter(Service):
    """Channel subscriptions, live fan-out and write-through persistence."""

    def __init__(
        self,
        message_repository: MessageRepository,
        messaging_settings: MessagingSettings,
    ) -> None:
        """Initialize message router.

        Args:
            message_repository: Durable message log
            messaging_settings: Retry and membership settings
        """
        self.message_repository = message_repository
        self.settings = messaging_settings
        self._members: dict[ChatId, set[Connection]] = {}
        # Last scheduled storage operation per channel
        self._tails: dict[ChatId, asyncio.Task] = {}

    def join_channel(self, connection: Connection, chat_id: ChatId) -> None:
        """Subscribe a connection to a channel's live events.

        Raises:
            ForbiddenError: With strict membership, if the connection's
                identity is not one of the channel's participants
        """
        if self.settings.strict_channel_membership:
            identity_id = connection.identity.id if connection.identity else ""
            if not chat_id.involves(IdentityId(identity_id)):
                raise ForbiddenError(str(chat_id), identity_id)

        self._members.setdefault(chat_id, set()).add(connection)
        connection.channels.add(chat_id)

    def leave_channel(self, connection: Connection, chat_id: ChatId) -> None:
        members = self._members.get(chat_id)
        if members is not None:
            members.discard(connection)
            if not members:
                del self._members[chat_id]
        connection.channels.discard(chat_id)

    def disconnect(self, connection: Connection) -> None:
        """Drop every subscription of a connection."""
        for chat_id in list(connection.channels):
            self.leave_channel(connection, chat_id)

    def channel_members(self, chat_id: ChatId) -> set[Connection]:
        return set(self._members.get(chat_id, ()))

    def send(
        self,
        connection: Connection,
        chat_id: ChatId,
        text: str,
        ephemeral: bool = False,
    ) -> Message:
        """Send a message to a channel.

        Delivered immediately to every joined connection, the sender's own
        included. Non-ephemeral messages are then queued for the durable log.

        Args:
            connection: Sending connection, must be authenticated
            chat_id: Target channel
            text: Message text, stored trimmed
            ephemeral: Deliver live only, never store

        Returns:
            The created message

        Raises:
            UnauthenticatedError: If the connection has no identity
            EmptyMessageError: If the text is blank
        """
        sender = connection.identity
        if sender is None:
            raise UnauthenticatedError()

        text = text.strip()
        if not text:
            raise EmptyMessageError()

        message = Message(
            id=MessageId(uuid4()),
            chat_id=chat_id,
            from_identity=sender.id,
            from_display_name=sender.display_name,
            from_avatar_url=sender.avatar_url,
            text=text,
            timestamp=utcnow(),
            ephemeral=ephemeral,
        )

        event = NewMessage(message=message)
        members = self._members.get(chat_id, ())
        for member in list(members):
            member.push(event)

        logfire.info(
            "Message delivered",
            chat_id=str(chat_id),
            message_id=str(message.id),
            recipients=len(members),
            ephemeral=ephemeral,
        )

        if not ephemeral:
            self._chain(chat_id, self._persist(connection, message))
        return message

    def typing(self, connection: Connection, chat_id: ChatId, is_typing: bool) -> None:
        """Relay a typing signal to the channel's other identities.

        Advisory only: ignored for unauthenticated connections.
        """
        sender = connection.identity
        if sender is None:
            return

        event = TypingSignal(chat_id=chat_id, identity_id=sender.id, is_typing=is_typing)
        for member in list(self._members.get(chat_id, ())):
            if member.identity is None or member.identity.id != sender.id:
                member.push(event)

    async def history(self, chat_id: ChatId, requestor: IdentityId) -> list[Message]:
        """Read a channel's durable log, oldest first.

        Raises:
            ForbiddenError: If the requestor is not a participant
            PersistenceUnavailableError: If the log cannot be read
        """
        self._authorize(chat_id, requestor)
        with logfire.span("message_router.history", chat_id=str(chat_id)):
            await self.flush(chat_id)
            return await self.message_repository.read(chat_id)

    async def clear(self, chat_id: ChatId, requestor: IdentityId) -> None:
        """Truncate a channel's durable log.

        Appends sent before the call land first and are cleared with the rest.

        Raises:
            ForbiddenError: If the requestor is not a participant
            PersistenceUnavailableError: If the log cannot be cleared
        """
        self._authorize(chat_id, requestor)
        with logfire.span("message_router.clear", chat_id=str(chat_id)):
            await self._chain(chat_id, self.message_repository.clear(chat_id))
            logfire.info("Chat cleared", chat_id=str(chat_id), identity_id=requestor)

    async def flush(self, chat_id: ChatId | None = None) -> None:
        """Wait for scheduled appends, on one channel or on all of them."""
        if chat_id is not None:
            tails = [self._tails[chat_id]] if chat_id in self._tails else []
        else:
            tails = list(self._tails.values())
        if tails:
            await asyncio.wait(tails)

    def _authorize(self, chat_id: ChatId, requestor: IdentityId) -> None:
        if not chat_id.involves(requestor):
            logfire.warn(
                "Chat access denied", chat_id=str(chat_id), identity_id=requestor
            )
            raise ForbiddenError(str(chat_id), requestor)

    def _chain(self, chat_id: ChatId, operation) -> asyncio.Task:
        previous = self._tails.get(chat_id)

        async def run():
            if previous is not None:
                # Outcome of the previous operation belongs to its own caller
                await asyncio.wait([previous])
            return await operation

        task = asyncio.create_task(run())
        self._tails[chat_id] = task

        def forget(done: asyncio.Task) -> None:
            if self._tails.get(chat_id) is done:
                del self._tails[chat_id]

        task.add_done_callback(forget)
        return task

    async def _persist(self, sender: Connection, message: Message) -> None:
        attempts = self.settings.persist_attempts
        for attempt in range(1, attempts + 1):
            try:
                await self.message_repository.append(message)
                return
            except PersistenceUnavailableError as e:
                logfire.warn(
                    "Message append failed",
                    chat_id=str(message.chat_id),
                    message_id=str(message.id),
                    attempt=attempt,
                    error=str(e),
                )
                if attempt < attempts:
                    await asyncio.sleep(self.settings.persist_retry_delay_seconds)
            except Exception:
                # Not a storage outage; retrying would repeat the same failure
                logfire.exception(
                    "Message append raised",
                    chat_id=str(message.chat_id),
                    message_id=str(message.id),
                    attempt=attempt,
                )
                break

        logfire.error(
            "Message not persisted",
            chat_id=str(message.chat_id),
            message_id=str(message.id),
        )
        sender.push(DeliveryWarning(message_id=message.id, chat_id=message.chat_id))
