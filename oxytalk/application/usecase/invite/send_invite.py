"""Send invite use case."""

from datetime import datetime

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.service import InviteService
from oxytalk.domain.value import IdentityId, InviteStatus


class SendInviteRequest(UseCaseModel):
    """Send invite request."""

    identity_id: str  # Inviter, from auth
    to_identity_id: str


class SendInviteResponse(UseCaseModel):
    """Send invite response."""

    invite_id: str
    from_identity: str
    to_identity: str
    status: InviteStatus
    created_at: datetime


class SendInviteUseCase:
    """Use case for inviting someone to become a contact."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize send invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: SendInviteRequest) -> SendInviteResponse:
        """Execute send invite flow.

        Args:
            request: Send invite request

        Returns:
            The created pending invite

        Raises:
            SelfInviteError: If inviting oneself
            NotFoundError: If the invitee does not exist
            AlreadyContactsError: If the two already are contacts
            InvitePendingError: If a pending invite exists for the pair
        """
        invite = await self.invite_service.send_invite(
            IdentityId(request.identity_id), IdentityId(request.to_identity_id)
        )
        return SendInviteResponse(
            invite_id=str(invite.id),
            from_identity=invite.from_identity,
            to_identity=invite.to_identity,
            status=invite.status,
            created_at=invite.created_at,
        )
