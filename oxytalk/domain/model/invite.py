"""Invite entity.

Invites gate first contact: two identities can only exchange messages after
one invited the other and the invite was accepted.
"""

from datetime import datetime

from pydantic import Field

from oxytalk.domain.model.common import DomainModel, utcnow
from oxytalk.domain.value import (
    ChatId,
    IdentityId,
    InviteId,
    InviteStatus,
    derive_chat_id,
)


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - At most one pending invite per unordered identity pair, either direction
    - Status moves exactly once: pending -> accepted | rejected
    - Invites are never deleted, they serve as an audit record
    """

    id: InviteId
    from_identity: IdentityId
    to_identity: IdentityId
    status: InviteStatus = InviteStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    responded_at: datetime | None = None

    @property
    def chat_id(self) -> ChatId:
        """Chat id of the pair this invite connects."""
        return derive_chat_id(self.from_identity, self.to_identity)

    def is_between(self, identity_a: IdentityId, identity_b: IdentityId) -> bool:
        """Check whether the invite connects the given unordered pair."""
        return {self.from_identity, self.to_identity} == {identity_a, identity_b}
