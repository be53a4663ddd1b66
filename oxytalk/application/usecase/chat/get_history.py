"""Get chat history use case."""

from datetime import datetime

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.model import Message
from oxytalk.domain.service import MessageRouter
from oxytalk.domain.value import ChatId, IdentityId


class MessageItem(UseCaseModel):
    """Stored message."""

    id: str
    chat_id: str
    from_identity: str
    from_display_name: str
    from_avatar_url: str | None = None
    text: str
    timestamp: datetime
    ephemeral: bool = False

    @classmethod
    def from_message(cls, message: Message) -> "MessageItem":
        return cls(
            id=str(message.id),
            chat_id=str(message.chat_id),
            from_identity=message.from_identity,
            from_display_name=message.from_display_name,
            from_avatar_url=message.from_avatar_url,
            text=message.text,
            timestamp=message.timestamp,
            ephemeral=message.ephemeral,
        )


class GetHistoryRequest(UseCaseModel):
    """Get history request."""

    identity_id: str  # Requestor, from auth
    chat_id: str


class GetHistoryResponse(UseCaseModel):
    """Durable log of a channel, oldest first. Never holds ephemeral messages."""

    chat_id: str
    messages: list[MessageItem]


class GetHistoryUseCase:
    """Use case for reading a channel's stored messages."""

    def __init__(self, message_router: MessageRouter) -> None:
        """Initialize get history use case.

        Args:
            message_router: Message router
        """
        self.message_router = message_router

    async def execute(self, request: GetHistoryRequest) -> GetHistoryResponse:
        """Execute get history flow.

        Raises:
            ForbiddenError: If the requestor is not a participant
            PersistenceUnavailableError: If the log cannot be read
        """
        chat_id = ChatId(request.chat_id)
        messages = await self.message_router.history(
            chat_id, IdentityId(request.identity_id)
        )
        return GetHistoryResponse(
            chat_id=str(chat_id),
            messages=[MessageItem.from_message(message) for message in messages],
        )
