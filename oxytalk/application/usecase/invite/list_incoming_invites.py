"""List incoming invites use case."""

from datetime import datetime

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.service import InviteService
from oxytalk.domain.value import IdentityId


class IncomingInviteItem(UseCaseModel):
    """Pending invite with the sender's profile."""

    invite_id: str
    from_identity: str
    from_display_name: str
    from_avatar_url: str | None = None
    created_at: datetime


class ListIncomingInvitesRequest(UseCaseModel):
    """List incoming invites request."""

    identity_id: str  # Invitee, from auth


class ListIncomingInvitesResponse(UseCaseModel):
    """List incoming invites response, oldest first."""

    invites: list[IncomingInviteItem]


class ListIncomingInvitesUseCase:
    """Use case for listing invites waiting for the caller's answer."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize list incoming invites use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(
        self, request: ListIncomingInvitesRequest
    ) -> ListIncomingInvitesResponse:
        incoming = await self.invite_service.list_incoming(
            IdentityId(request.identity_id)
        )
        return ListIncomingInvitesResponse(
            invites=[
                IncomingInviteItem(
                    invite_id=str(invite.invite_id),
                    from_identity=invite.from_identity,
                    from_display_name=invite.from_display_name,
                    from_avatar_url=invite.from_avatar_url,
                    created_at=invite.created_at,
                )
                for invite in incoming
            ]
        )
