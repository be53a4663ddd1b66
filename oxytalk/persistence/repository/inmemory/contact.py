"""In-memory contact repository for testing."""

from oxytalk.domain.model.contact import ContactEdge
from oxytalk.domain.repository.contact import ContactRepository
from oxytalk.domain.value import IdentityId


class InMemoryContactRepository(ContactRepository):
    """In-memory implementation of ContactRepository for testing."""

    def __init__(self) -> None:
        # Insertion ordered
        self._edges: dict[tuple[IdentityId, IdentityId], ContactEdge] = {}

    async def exists(self, identity_a: IdentityId, identity_b: IdentityId) -> bool:
        """Check whether the unordered pair is a contact edge."""
        low, high = sorted((identity_a, identity_b))
        return (low, high) in self._edges

    async def add(self, edge: ContactEdge) -> bool:
        """Add an edge unless it already exists."""
        key = (edge.identity_a, edge.identity_b)
        if key in self._edges:
            return False
        self._edges[key] = edge
        return True

    async def find_for(self, identity_id: IdentityId) -> list[ContactEdge]:
        """Find edges touching an identity, in creation order."""
        return [
            edge
            for edge in self._edges.values()
            if identity_id in (edge.identity_a, edge.identity_b)
        ]
