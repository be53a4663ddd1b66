"""PostgreSQL repository implementations."""

from oxytalk.persistence.repository.contact import PostgresContactRepository
from oxytalk.persistence.repository.identity import PostgresIdentityDirectory
from oxytalk.persistence.repository.invite import PostgresInviteRepository
from oxytalk.persistence.repository.message import PostgresMessageRepository

__all__ = [
    "PostgresContactRepository",
    "PostgresIdentityDirectory",
    "PostgresInviteRepository",
    "PostgresMessageRepository",
]
