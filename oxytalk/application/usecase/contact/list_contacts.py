"""List contacts use case."""

from oxytalk.application.usecase.base import UseCaseModel
from oxytalk.domain.service import ContactService, PresenceRegistry
from oxytalk.domain.value import IdentityId


class ContactItem(UseCaseModel):
    """Contact in the contact list."""

    identity_id: str
    display_name: str
    avatar_url: str | None = None
    chat_id: str
    online: bool


class ListContactsRequest(UseCaseModel):
    """List contacts request."""

    identity_id: str  # From auth


class ListContactsResponse(UseCaseModel):
    """List contacts response, oldest contact first."""

    contacts: list[ContactItem]


class ListContactsUseCase:
    """Use case for listing contacts with their current presence."""

    def __init__(
        self, contact_service: ContactService, presence: PresenceRegistry
    ) -> None:
        """Initialize list contacts use case.

        Args:
            contact_service: Contact graph domain service
            presence: Presence registry
        """
        self.contact_service = contact_service
        self.presence = presence

    async def execute(self, request: ListContactsRequest) -> ListContactsResponse:
        contacts = await self.contact_service.list_contacts(
            IdentityId(request.identity_id)
        )
        return ListContactsResponse(
            contacts=[
                ContactItem(
                    identity_id=contact.identity_id,
                    display_name=contact.display_name,
                    avatar_url=contact.avatar_url,
                    chat_id=str(contact.chat_id),
                    online=self.presence.is_online(contact.identity_id),
                )
                for contact in contacts
            ]
        )
