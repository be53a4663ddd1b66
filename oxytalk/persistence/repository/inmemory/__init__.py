"""In-memory repository implementations for testing."""

from .contact import InMemoryContactRepository
from .identity import InMemoryIdentityDirectory
from .invite import InMemoryInviteRepository
from .message import InMemoryMessageRepository

__all__ = [
    "InMemoryContactRepository",
    "InMemoryIdentityDirectory",
    "InMemoryInviteRepository",
    "InMemoryMessageRepository",
]
