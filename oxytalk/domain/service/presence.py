"""Presence registry.

An identity is online while it holds at least one live connection. Observers
are told about transitions only, never about a second tab opening.
"""

from typing import Callable

import logfire

from oxytalk.domain.model import PresenceChanged
from oxytalk.domain.value import ConnectionId, IdentityId

from .base import Service

PresenceObserver = Callable[[PresenceChanged], None]


class PresenceRegistry(Service):
    """Tracks live connections per identity and announces online/offline."""

    def __init__(self) -> None:
        self._connections: dict[IdentityId, set[ConnectionId]] = {}
        self._observers: list[PresenceObserver] = []

    def connection_opened(
        self, identity_id: IdentityId, connection_id: ConnectionId
    ) -> bool:
        """Register a live connection.

        Args:
            identity_id: Identity the connection authenticated as
            connection_id: Connection handle

        Returns:
            True if the identity just came online
        """
        handles = self._connections.setdefault(identity_id, set())
        if connection_id in handles:
            return False
        handles.add(connection_id)
        if len(handles) > 1:
            return False

        logfire.info("Identity online", identity_id=identity_id)
        self._notify(PresenceChanged(identity_id=identity_id, online=True))
        return True

    def connection_closed(
        self, identity_id: IdentityId, connection_id: ConnectionId
    ) -> bool:
        """Unregister a connection. Unknown or already closed handles are ignored.

        Args:
            identity_id: Identity the connection authenticated as
            connection_id: Connection handle

        Returns:
            True if the identity just went offline
        """
        handles = self._connections.get(identity_id)
        if not handles or connection_id not in handles:
            return False
        handles.discard(connection_id)
        if handles:
            return False

        del self._connections[identity_id]
        logfire.info("Identity offline", identity_id=identity_id)
        self._notify(PresenceChanged(identity_id=identity_id, online=False))
        return True

    def is_online(self, identity_id: IdentityId) -> bool:
        return bool(self._connections.get(identity_id))

    def connection_count(self, identity_id: IdentityId) -> int:
        return len(self._connections.get(identity_id, ()))

    def online_identities(self) -> set[IdentityId]:
        return set(self._connections)

    def subscribe(self, observer: PresenceObserver) -> Callable[[], None]:
        """Register a transition observer.

        Returns:
            Callable that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            try:
                self._observers.remove(observer)
            except ValueError:
                return

        return unsubscribe

    def _notify(self, event: PresenceChanged) -> None:
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception as e:
                logfire.error(
                    "Presence observer failed",
                    identity_id=event.identity_id,
                    error=str(e),
                )
