"""Contact edge entity.

A contact edge is the permanent, mutual permission to message. It is only
ever created as a side effect of an accepted invite and never removed here.
"""

from datetime import datetime

from pydantic import Field

from oxytalk.domain.model.common import DomainModel, utcnow
from oxytalk.domain.value import ChatId, IdentityId, derive_chat_id


class ContactEdge(DomainModel):
    """Unordered contact pair, stored with ``identity_a < identity_b``."""

    identity_a: IdentityId
    identity_b: IdentityId
    created_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def between(cls, identity_a: IdentityId, identity_b: IdentityId) -> "ContactEdge":
        """Build the canonical edge for a pair, in either argument order."""
        low, high = sorted((identity_a, identity_b))
        return cls(identity_a=low, identity_b=high)

    @property
    def chat_id(self) -> ChatId:
        """Chat id of this contact pair."""
        return derive_chat_id(self.identity_a, self.identity_b)

    def other(self, identity_id: IdentityId) -> IdentityId:
        """Return the participant that is not ``identity_id``."""
        return self.identity_b if identity_id == self.identity_a else self.identity_a
