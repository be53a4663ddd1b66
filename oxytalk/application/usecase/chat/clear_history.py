"""Clear chat history use case."""

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.service import MessageRouter
from oxytalk.domain.value import ChatId, IdentityId


class ClearHistoryRequest(UseCaseModel):
    """Clear history request."""

    identity_id: str  # Requestor, from auth
    chat_id: str


class ClearHistoryResponse(UseCaseModel):
    """Clear history response."""

    chat_id: str
    cleared: bool = True


class ClearHistoryUseCase:
    """Use case for truncating a channel's stored messages.

    Only future history reads are affected; what participants already
    rendered stays on their screens.
    """

    def __init__(self, message_router: MessageRouter) -> None:
        """Initialize clear history use case.

        Args:
            message_router: Message router
        """
        self.message_router = message_router

    async def execute(self, request: ClearHistoryRequest) -> ClearHistoryResponse:
        chat_id = ChatId(request.chat_id)
        await self.message_router.clear(chat_id, IdentityId(request.identity_id))
        return ClearHistoryResponse(chat_id=str(chat_id))
