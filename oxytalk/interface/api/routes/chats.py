"""Chat history routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Security
from fastapi.security import HTTPAuthorizationCredentials

from oxytalk.application.usecase.chat import (
    ClearHistoryRequest,
    ClearHistoryResponse,
    ClearHistoryUseCase,
    GetHistoryRequest,
    GetHistoryResponse,
    GetHistoryUseCase,
)
from oxytalk.application.usecase.identity import GetCurrentIdentityUseCase
from oxytalk.interface.api.auth import authenticate, bearer_scheme

router = APIRouter(prefix="/chats", tags=["chats"], route_class=DishkaRoute)


@router.get("/{chat_id}/messages", response_model=GetHistoryResponse)
async def get_history(
    chat_id: str,
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    get_history_use_case: FromDishka[GetHistoryUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> GetHistoryResponse:
    """Read a chat's stored messages, oldest first.

    Raises:
        ForbiddenError: Caller is not one of the two participants (403)
    """
    me = await authenticate(current_identity_use_case, credentials)
    return await get_history_use_case.execute(
        GetHistoryRequest(identity_id=me.identity_id, chat_id=chat_id)
    )


@router.delete("/{chat_id}/messages", response_model=ClearHistoryResponse)
async def clear_history(
    chat_id: str,
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    clear_history_use_case: FromDishka[ClearHistoryUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ClearHistoryResponse:
    """Delete a chat's stored messages for both participants.

    Raises:
        ForbiddenError: Caller is not one of the two participants (403)
    """
    me = await authenticate(current_identity_use_case, credentials)
    return await clear_history_use_case.execute(
        ClearHistoryRequest(identity_id=me.identity_id, chat_id=chat_id)
    )
