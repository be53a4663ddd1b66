"""In-memory identity directory for testing."""

from typing import Optional

from oxytalk.domain.model.identity import Identity
from oxytalk.domain.repository.identity import IdentityDirectory
from oxytalk.domain.value import IdentityId


class InMemoryIdentityDirectory(IdentityDirectory):
    """In-memory implementation of IdentityDirectory for testing."""

    def __init__(self) -> None:
        self._identities: dict[IdentityId, Identity] = {}

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        return self._identities.get(identity_id)

    async def find_many(
        self, identity_ids: list[IdentityId]
    ) -> dict[IdentityId, Identity]:
        """Find several identities at once."""
        return {
            identity_id: self._identities[identity_id]
            for identity_id in identity_ids
            if identity_id in self._identities
        }

    async def search_by_display_name_prefix(
        self, query: str, excluding: IdentityId, limit: int
    ) -> list[Identity]:
        """Case-insensitive display name prefix search."""
        prefix = query.lower()
        matches = [
            identity
            for identity in self._identities.values()
            if identity.id != excluding
            and identity.display_name.lower().startswith(prefix)
        ]
        matches.sort(key=lambda identity: (identity.display_name.lower(), identity.id))
        return matches[:limit]

    async def save(self, identity: Identity) -> Identity:
        """Save an identity (create or update)."""
        self._identities[identity.id] = identity
        return identity
