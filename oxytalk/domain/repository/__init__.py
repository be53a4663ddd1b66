"""Repository interfaces for the OxyTalk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from oxytalk.domain.repository.contact import ContactRepository
from oxytalk.domain.repository.identity import IdentityDirectory
from oxytalk.domain.repository.invite import InviteRepository
from oxytalk.domain.repository.message import MessageRepository

__all__ = [
    "ContactRepository",
    "IdentityDirectory",
    "InviteRepository",
    "MessageRepository",
]
