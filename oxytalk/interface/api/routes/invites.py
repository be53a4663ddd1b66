"""Invite routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Security, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from oxytalk.application.usecase.identity import GetCurrentIdentityUseCase
from oxytalk.application.usecase.invite import (
    ListIncomingInvitesRequest,
    ListIncomingInvitesResponse,
    ListIncomingInvitesUseCase,
    RespondInviteRequest,
    RespondInviteResponse,
    RespondInviteUseCase,
    SendInviteRequest,
    SendInviteResponse,
    SendInviteUseCase,
)
from oxytalk.domain.value import InviteAction
from oxytalk.interface.api.auth import authenticate, bearer_scheme

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class SendInviteAPIRequest(BaseModel):
    """API request for sending an invite."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    to_identity_id: str


class RespondInviteAPIRequest(BaseModel):
    """API request for answering an invite."""

    action: InviteAction


@router.post(
    "", response_model=SendInviteResponse, status_code=status.HTTP_201_CREATED
)
async def send_invite(
    request: SendInviteAPIRequest,
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    send_invite_use_case: FromDishka[SendInviteUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> SendInviteResponse:
    """Invite another identity to become a contact.

    Raises:
        SelfInviteError: Inviting oneself (400)
        NotFoundError: Unknown invitee (404)
        AlreadyContactsError: Already contacts (409)
        InvitePendingError: An invite is pending in either direction (409)
    """
    me = await authenticate(current_identity_use_case, credentials)
    response = await send_invite_use_case.execute(
        SendInviteRequest(identity_id=me.identity_id, to_identity_id=request.to_identity_id)
    )
    logger.info(f"Invite {response.invite_id} sent to {response.to_identity}")
    return response


@router.get("/incoming", response_model=ListIncomingInvitesResponse)
async def list_incoming_invites(
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    list_incoming_use_case: FromDishka[ListIncomingInvitesUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ListIncomingInvitesResponse:
    """List pending invites addressed to the caller, oldest first."""
    me = await authenticate(current_identity_use_case, credentials)
    return await list_incoming_use_case.execute(
        ListIncomingInvitesRequest(identity_id=me.identity_id)
    )


@router.post("/{invite_id}/respond", response_model=RespondInviteResponse)
async def respond_invite(
    invite_id: str,
    request: RespondInviteAPIRequest,
    current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    respond_invite_use_case: FromDishka[RespondInviteUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> RespondInviteResponse:
    """Accept or reject an invite addressed to the caller.

    Example:
        POST /invites/7b0c.../respond
        {"action": "accept"}

        Response:
        {
            "inviteId": "7b0c...",
            "status": "accepted",
            "counterpartId": "u-17",
            "chatId": "chat:u-17:u-42"
        }

    Raises:
        InviteNotFoundError: No pending invite with that id for the caller (404)
    """
    me = await authenticate(current_identity_use_case, credentials)
    return await respond_invite_use_case.execute(
        RespondInviteRequest(
            identity_id=me.identity_id, invite_id=invite_id, action=request.action
        )
    )
