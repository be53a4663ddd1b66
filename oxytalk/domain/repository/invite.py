"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from oxytalk.domain.model.invite import Invite
from oxytalk.domain.value import IdentityId, InviteId, InviteStatus


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_between(
        self, identity_a: IdentityId, identity_b: IdentityId
    ) -> Invite | None:
        """Find the pending invite for an unordered pair, in either direction.

        Args:
            identity_a: One identity of the pair
            identity_b: The other identity of the pair

        Returns:
            The pending invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_for(self, to_identity: IdentityId) -> list[Invite]:
        """Find pending invites addressed to an identity.

        Args:
            to_identity: The invitee

        Returns:
            Pending invites, oldest first
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Create a new invite.

        Args:
            invite: The invite to create

        Returns:
            The saved invite

        Raises:
            IntegrityError: If a pending invite already exists for the pair
        """
        pass

    @abstractmethod
    async def transition(
        self,
        invite_id: InviteId,
        responder: IdentityId,
        status: InviteStatus,
        responded_at: datetime,
    ) -> Invite | None:
        """Atomically move a pending invite to a terminal status.

        Compare-and-swap: succeeds only if the invite is still pending and is
        addressed to ``responder``. Of several concurrent calls for the same
        invite, exactly one succeeds.

        Args:
            invite_id: The invite's unique identifier
            responder: Identity the invite must be addressed to
            status: Terminal status to move to
            responded_at: Response timestamp

        Returns:
            The updated invite, or None if no matching pending invite exists
        """
        pass
