"""Contact repository interface."""

from abc import ABC, abstractmethod

from oxytalk.domain.model.contact import ContactEdge
from oxytalk.domain.value import IdentityId


class ContactRepository(ABC):
    """Repository for the symmetric contact relation."""

    @abstractmethod
    async def exists(self, identity_a: IdentityId, identity_b: IdentityId) -> bool:
        """Check whether an edge exists for the unordered pair.

        Args:
            identity_a: One identity
            identity_b: The other identity

        Returns:
            True if the two identities are contacts
        """
        pass

    @abstractmethod
    async def add(self, edge: ContactEdge) -> bool:
        """Add an edge unless it already exists.

        Args:
            edge: Canonical contact edge

        Returns:
            True if the edge was created, False if it already existed
        """
        pass

    @abstractmethod
    async def find_for(self, identity_id: IdentityId) -> list[ContactEdge]:
        """Find all edges touching an identity.

        Args:
            identity_id: The identity

        Returns:
            Edges in the order they were created
        """
        pass
