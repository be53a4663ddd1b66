"""PostgreSQL implementation of Message repository.

Unlike the other repositories this one is not bound to a request session: the
message router appends in the background, after the request or socket frame
that produced the message is done. Each operation runs in its own transaction.
"""

from sqlalchemy import delete, exists, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from oxytalk.domain.model import Message
from oxytalk.domain.repository import MessageRepository
from oxytalk.domain.value import ChatId
from oxytalk.persistence.error import database_errors
from oxytalk.persistence.mappers import message_to_dict, row_to_message
from oxytalk.persistence.tables import channels_table, messages_table


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory for per-operation sessions
        """
        self.session_factory = session_factory

    async def ensure_channel(self, chat_id: ChatId) -> None:
        """Create the channel's log if it does not exist yet."""
        stmt = (
            pg_insert(channels_table)
            .values(chat_id=str(chat_id))
            .on_conflict_do_nothing(index_elements=["chat_id"])
        )
        with database_errors("ensure_channel"):
            async with self.session_factory.begin() as session:
                await session.execute(stmt)

    async def channel_exists(self, chat_id: ChatId) -> bool:
        stmt = select(exists().where(channels_table.c.chat_id == str(chat_id)))
        with database_errors("channel_exists"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return bool(result.scalar())

    async def append(self, message: Message) -> None:
        """Append a message to its channel's log, creating the channel if needed."""
        ensure = (
            pg_insert(channels_table)
            .values(chat_id=str(message.chat_id))
            .on_conflict_do_nothing(index_elements=["chat_id"])
        )
        stmt = insert(messages_table).values(**message_to_dict(message))
        with database_errors("append_message"):
            async with self.session_factory.begin() as session:
                await session.execute(ensure)
                await session.execute(stmt)

    async def read(self, chat_id: ChatId) -> list[Message]:
        """Read a channel's log in append order."""
        stmt = (
            select(messages_table)
            .where(messages_table.c.chat_id == str(chat_id))
            .order_by(messages_table.c.seq)
        )
        with database_errors("read_messages"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.mappings().all()
        return [row_to_message(dict(row)) for row in rows]

    async def clear(self, chat_id: ChatId) -> None:
        """Delete every message of a channel. The channel itself stays."""
        stmt = delete(messages_table).where(messages_table.c.chat_id == str(chat_id))
        with database_errors("clear_messages"):
            async with self.session_factory.begin() as session:
                await session.execute(stmt)
