"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from oxytalk.domain.model.invite import Invite
from oxytalk.domain.repository.invite import InviteRepository
from oxytalk.domain.value import IdentityId, InviteId, InviteStatus


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: list[Invite] = []

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        for invite in self._invites:
            if invite.id == invite_id:
                return invite
        return None

    async def find_pending_between(
        self, identity_a: IdentityId, identity_b: IdentityId
    ) -> Optional[Invite]:
        """Find the pending invite for an unordered pair."""
        for invite in self._invites:
            if invite.status == InviteStatus.PENDING and invite.is_between(
                identity_a, identity_b
            ):
                return invite
        return None

    async def find_pending_for(self, to_identity: IdentityId) -> list[Invite]:
        """Find pending invites addressed to an identity, oldest first."""
        return [
            invite
            for invite in self._invites
            if invite.to_identity == to_identity
            and invite.status == InviteStatus.PENDING
        ]

    async def save(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Raises:
            IntegrityError: If a pending invite already exists for the pair
        """
        existing_pending = await self.find_pending_between(
            invite.from_identity, invite.to_identity
        )
        if existing_pending:
            raise IntegrityError("Duplicate pending invite", None, Exception())

        self._invites.append(invite)
        return invite

    async def transition(
        self,
        invite_id: InviteId,
        responder: IdentityId,
        status: InviteStatus,
        responded_at: datetime,
    ) -> Optional[Invite]:
        """Move a pending invite to a terminal status, if still pending."""
        # No await between check and write, so this is atomic on the loop
        for i, invite in enumerate(self._invites):
            if invite.id != invite_id:
                continue
            if invite.status != InviteStatus.PENDING or invite.to_identity != responder:
                return None
            updated = invite.model_copy(
                update={"status": status, "responded_at": responded_at}
            )
            self._invites[i] = updated
            return updated
        return None
