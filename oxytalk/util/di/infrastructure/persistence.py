"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from oxytalk.config import Settings
from oxytalk.domain.repository import (
    ContactRepository,
    IdentityDirectory,
    InviteRepository,
    MessageRepository,
)
from oxytalk.persistence.database import create_engine, create_session_factory
from oxytalk.persistence.repository import (
    PostgresContactRepository,
    PostgresIdentityDirectory,
    PostgresInviteRepository,
    PostgresMessageRepository,
)
from oxytalk.util.di.base import ProviderBase
from oxytalk.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        An accepted invite's status change and contact edge therefore land
        together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_identity_directory(self, session: AsyncSession) -> IdentityDirectory:
        """Provide identity directory."""
        return PostgresIdentityDirectory(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide Invite repository."""
        return PostgresInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contact_repository(self, session: AsyncSession) -> ContactRepository:
        """Provide Contact repository."""
        return PostgresContactRepository(session)

    @provide(scope=Scope.APP)
    def get_message_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> MessageRepository:
        """Provide Message repository.

        Not request-bound: the router appends in the background.
        """
        return PostgresMessageRepository(session_factory)
