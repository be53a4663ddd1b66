"""In-memory message repository for testing."""

from oxytalk.domain.model.message import Message
from oxytalk.domain.repository.message import MessageRepository
from oxytalk.domain.value import ChatId


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self) -> None:
        self._logs: dict[ChatId, list[Message]] = {}

    async def ensure_channel(self, chat_id: ChatId) -> None:
        """Create the channel's log if absent."""
        self._logs.setdefault(chat_id, [])

    async def channel_exists(self, chat_id: ChatId) -> bool:
        return chat_id in self._logs

    async def append(self, message: Message) -> None:
        """Append a message to its channel's log."""
        self._logs.setdefault(message.chat_id, []).append(message)

    async def read(self, chat_id: ChatId) -> list[Message]:
        """Read a channel's log in append order."""
        return list(self._logs.get(chat_id, []))

    async def clear(self, chat_id: ChatId) -> None:
        """Truncate a channel's log."""
        if chat_id in self._logs:
            self._logs[chat_id] = []
