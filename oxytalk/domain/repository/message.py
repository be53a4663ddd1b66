"""Message log repository interface."""

from abc import ABC, abstractmethod

from oxytalk.domain.model.message import Message
from oxytalk.domain.value import ChatId


class MessageRepository(ABC):
    """Durable, append-only, clearable message log per chat channel.

    Implementations raise PersistenceUnavailableError on I/O failure.
    """

    @abstractmethod
    async def ensure_channel(self, chat_id: ChatId) -> None:
        """Create the channel's log if absent. Creating twice is a no-op.

        Args:
            chat_id: The channel
        """
        pass

    @abstractmethod
    async def channel_exists(self, chat_id: ChatId) -> bool:
        """Check whether the channel's log was created.

        Args:
            chat_id: The channel

        Returns:
            True if the log exists
        """
        pass

    @abstractmethod
    async def append(self, message: Message) -> None:
        """Append a message to its channel's log, creating the log if needed.

        Args:
            message: Non-ephemeral message to store
        """
        pass

    @abstractmethod
    async def read(self, chat_id: ChatId) -> list[Message]:
        """Read a channel's log in append order.

        Args:
            chat_id: The channel

        Returns:
            Stored messages, empty if the log does not exist
        """
        pass

    @abstractmethod
    async def clear(self, chat_id: ChatId) -> None:
        """Truncate a channel's log to empty.

        Args:
            chat_id: The channel
        """
        pass
