"""Respond to invite use case."""

from uuid import UUID

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.error import InviteNotFoundError
from oxytalk.domain.service import InviteService
from oxytalk.domain.value import IdentityId, InviteAction, InviteId, InviteStatus


class RespondInviteRequest(UseCaseModel):
    """Respond to invite request."""

    identity_id: str  # Invitee, from auth
    invite_id: str
    action: InviteAction


class RespondInviteResponse(UseCaseModel):
    """Respond to invite response.

    ``chat_id`` is set when the invite was accepted, so the client can open
    the new channel right away.
    """

    invite_id: str
    status: InviteStatus
    counterpart_id: str
    chat_id: str | None = None


class RespondInviteUseCase:
    """Use case for accepting or rejecting an invite."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize respond invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: RespondInviteRequest) -> RespondInviteResponse:
        """Execute respond invite flow.

        Raises:
            InviteNotFoundError: If there is no pending invite with that id
                addressed to the caller
        """
        try:
            invite_id = InviteId(UUID(request.invite_id))
        except ValueError:
            raise InviteNotFoundError(request.invite_id)

        result = await self.invite_service.respond_invite(
            invite_id, IdentityId(request.identity_id), request.action
        )
        return RespondInviteResponse(
            invite_id=str(result.invite.id),
            status=result.invite.status,
            counterpart_id=result.counterpart,
            chat_id=str(result.chat_id) if result.chat_id else None,
        )
