"""Identity directory interface."""

from abc import ABC, abstractmethod
from typing import Optional

from oxytalk.domain.model.identity import Identity
from oxytalk.domain.value import IdentityId


class IdentityDirectory(ABC):
    """Read access to identities owned by the external identity service.

    ``save`` exists so tests and seeding tools can populate the directory;
    the messaging core itself never writes identities.
    """

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID.

        Args:
            identity_id: The identity's opaque identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(self, identity_ids: list[IdentityId]) -> dict[IdentityId, Identity]:
        """Find several identities at once.

        Args:
            identity_ids: Identifiers to look up

        Returns:
            Mapping of the identities that were found
        """
        pass

    @abstractmethod
    async def search_by_display_name_prefix(
        self, query: str, excluding: IdentityId, limit: int
    ) -> list[Identity]:
        """Case-insensitive display name prefix search.

        Args:
            query: Display name prefix
            excluding: Identity to leave out (the searcher)
            limit: Maximum number of results

        Returns:
            Matching identities ordered by display name
        """
        pass

    @abstractmethod
    async def save(self, identity: Identity) -> Identity:
        """Save an identity (create or update).

        Args:
            identity: The identity to save

        Returns:
            The saved identity
        """
        pass
