"""Mock persistence providers for testing."""

from dishka import Scope, provide

from oxytalk.domain.repository import (
    ContactRepository,
    IdentityDirectory,
    InviteRepository,
    MessageRepository,
)
from oxytalk.persistence.repository.inmemory import (
    InMemoryContactRepository,
    InMemoryIdentityDirectory,
    InMemoryInviteRepository,
    InMemoryMessageRepository,
)
from oxytalk.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one container, the
    way a database would. Each test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_directory(self) -> IdentityDirectory:
        """Provide in-memory identity directory."""
        return InMemoryIdentityDirectory()

    @provide(scope=Scope.APP)
    def get_invite_repository(self) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository()

    @provide(scope=Scope.APP)
    def get_contact_repository(self) -> ContactRepository:
        """Provide in-memory contact repository."""
        return InMemoryContactRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        """Provide in-memory message repository."""
        return InMemoryMessageRepository()
