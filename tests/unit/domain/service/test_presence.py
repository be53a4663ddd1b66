"""Unit tests for PresenceRegistry."""

from uuid import uuid4

import pytest

from oxytalk.domain.model import PresenceChanged
from oxytalk.domain.service import PresenceRegistry
from oxytalk.domain.value import ConnectionId, IdentityId

ALICE = IdentityId("alice")


def new_connection_id() -> ConnectionId:
    return ConnectionId(uuid4())


@pytest.fixture
def registry():
    return PresenceRegistry()


@pytest.fixture
def events(registry):
    received: list[PresenceChanged] = []
    registry.subscribe(received.append)
    return received


class TestPresenceRegistry:
    """Tests for online/offline transitions."""

    def test_first_connection_goes_online(self, registry, events):
        """Opening the first connection announces online."""
        assert registry.connection_opened(ALICE, new_connection_id()) is True

        assert registry.is_online(ALICE)
        assert events == [PresenceChanged(identity_id=ALICE, online=True)]

    def test_second_tab_is_silent(self, registry, events):
        """Further connections do not announce anything."""
        registry.connection_opened(ALICE, new_connection_id())

        assert registry.connection_opened(ALICE, new_connection_id()) is False

        assert registry.connection_count(ALICE) == 2
        assert len(events) == 1

    def test_offline_only_after_last_connection(self, registry, events):
        """Offline is announced once the last connection closes."""
        # Arrange
        first, second = new_connection_id(), new_connection_id()
        registry.connection_opened(ALICE, first)
        registry.connection_opened(ALICE, second)

        # Act & Assert
        assert registry.connection_closed(ALICE, first) is False
        assert registry.is_online(ALICE)
        assert registry.connection_closed(ALICE, second) is True
        assert not registry.is_online(ALICE)
        assert events[-1] == PresenceChanged(identity_id=ALICE, online=False)

    def test_unknown_close_is_ignored(self, registry, events):
        """Closing a handle that was never opened changes nothing."""
        assert registry.connection_closed(ALICE, new_connection_id()) is False
        assert events == []

    def test_double_close_is_ignored(self, registry, events):
        connection_id = new_connection_id()
        registry.connection_opened(ALICE, connection_id)
        registry.connection_closed(ALICE, connection_id)

        assert registry.connection_closed(ALICE, connection_id) is False
        assert len(events) == 2

    def test_online_identities(self, registry):
        registry.connection_opened(ALICE, new_connection_id())
        registry.connection_opened(IdentityId("bob"), new_connection_id())

        assert registry.online_identities() == {ALICE, IdentityId("bob")}

    def test_unsubscribe_stops_events(self, registry):
        received = []
        unsubscribe = registry.subscribe(received.append)
        unsubscribe()
        unsubscribe()

        registry.connection_opened(ALICE, new_connection_id())

        assert received == []

    def test_failing_observer_does_not_block_others(self, registry, events):
        """One broken observer should not stop delivery to the rest."""

        def broken(event):
            raise RuntimeError("boom")

        registry.subscribe(broken)
        later: list[PresenceChanged] = []
        registry.subscribe(later.append)

        registry.connection_opened(ALICE, new_connection_id())

        assert len(events) == 1
        assert len(later) == 1
