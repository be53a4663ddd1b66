"""Live connection handle."""

import asyncio
import logging
from uuid import uuid4

from oxytalk.domain.model.event import RealtimeEvent
from oxytalk.domain.model.identity import Identity
from oxytalk.domain.value import ChatId, ConnectionId

logger = logging.getLogger(__name__)


class Connection:
    """One live realtime connection (a browser tab, a device).

    Events are queued on a bounded outbox that the transport drains. Pushing
    never blocks: once the connection is closed or its outbox is full,
    further events are dropped.
    """

    def __init__(self, outbox_size: int = 256) -> None:
        self.id = ConnectionId(uuid4())
        self.identity: Identity | None = None
        self.channels: set[ChatId] = set()
        self._outbox: asyncio.Queue[RealtimeEvent] = asyncio.Queue(maxsize=outbox_size)
        self._closed = False

    def __repr__(self) -> str:
        who = self.identity.id if self.identity else "anonymous"
        return f"<Connection {self.id} {who}>"

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def authenticate(self, identity: Identity) -> None:
        """Bind the connection to an identity."""
        self.identity = identity

    def push(self, event: RealtimeEvent) -> bool:
        """Queue an event for delivery.

        Returns:
            True if queued, False if dropped
        """
        if self._closed:
            return False
        try:
            self._outbox.put_nowait(event)
        except asyncio.QueueFull:
            logger.warning(f"Outbox full, dropping {type(event).__name__} for {self!r}")
            return False
        return True

    async def next_event(self) -> RealtimeEvent:
        """Wait for the next queued event."""
        return await self._outbox.get()

    def pending_events(self) -> list[RealtimeEvent]:
        """Take every queued event without waiting."""
        events = []
        while not self._outbox.empty():
            events.append(self._outbox.get_nowait())
        return events

    def close(self) -> None:
        """Stop accepting events."""
        self._closed = True
