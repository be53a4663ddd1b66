"""Identity entity.

Identities are registered and authenticated by the external identity service.
The messaging core only reads them: to enrich invites, contact lists and
messages with a display name and avatar.
"""

from datetime import datetime

from pydantic import Field

from oxytalk.domain.model.common import DomainModel, utcnow
from oxytalk.domain.value import IdentityId


class Identity(DomainModel):
    """A registered user, referenced everywhere else by its opaque id."""

    id: IdentityId
    display_name: str = Field(min_length=1, max_length=64)
    avatar_url: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
