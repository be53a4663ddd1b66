"""Contact use cases."""

from oxytalk.application.usecase.contact.check_contact import (
    CheckContactRequest,
    CheckContactResponse,
    CheckContactUseCase,
)
from oxytalk.application.usecase.contact.list_contacts import (
    ContactItem,
    ListContactsRequest,
    ListContactsResponse,
    ListContactsUseCase,
)

__all__ = [
    "CheckContactRequest",
    "CheckContactResponse",
    "CheckContactUseCase",
    "ContactItem",
    "ListContactsRequest",
    "ListContactsResponse",
    "ListContactsUseCase",
]
