"""Contact graph domain service."""

from dataclasses import dataclass

import logfire

from oxytalk.domain.model import ContactEdge
from oxytalk.domain.repository import ContactRepository, IdentityDirectory
from oxytalk.domain.value import ChatId, IdentityId, derive_chat_id

from .base import Service


@dataclass
class ContactView:
    """A contact as shown in the contact list."""

    identity_id: IdentityId
    display_name: str
    avatar_url: str | None
    chat_id: ChatId


@dataclass
class ContactCheck:
    """Result of checking whether two identities are contacts."""

    is_contact: bool
    chat_id: ChatId | None = None


class ContactService(Service):
    """Domain service for the symmetric contact relation."""

    def __init__(
        self,
        contact_repository: ContactRepository,
        identity_directory: IdentityDirectory,
    ) -> None:
        """Initialize contact service.

        Args:
            contact_repository: Contact repository
            identity_directory: Identity directory used to enrich contact lists
        """
        self.contact_repository = contact_repository
        self.identity_directory = identity_directory

    async def are_contacts(self, identity_a: IdentityId, identity_b: IdentityId) -> bool:
        """Check whether two identities are contacts, in either argument order."""
        if identity_a == identity_b:
            return False
        return await self.contact_repository.exists(identity_a, identity_b)

    async def add_contact(self, identity_a: IdentityId, identity_b: IdentityId) -> bool:
        """Add a contact edge. Adding an existing edge is a no-op.

        Args:
            identity_a: One identity
            identity_b: The other identity

        Returns:
            True if a new edge was created
        """
        with logfire.span(
            "contact_service.add_contact",
            identity_a=identity_a,
            identity_b=identity_b,
        ):
            created = await self.contact_repository.add(
                ContactEdge.between(identity_a, identity_b)
            )
            if created:
                logfire.info("Contact added", identity_a=identity_a, identity_b=identity_b)
            return created

    async def check_contact(
        self, identity_id: IdentityId, other_id: IdentityId
    ) -> ContactCheck:
        """Check contact status and disclose the chat id to contacts only."""
        if await self.are_contacts(identity_id, other_id):
            return ContactCheck(is_contact=True, chat_id=derive_chat_id(identity_id, other_id))
        return ContactCheck(is_contact=False)

    async def list_contacts(self, identity_id: IdentityId) -> list[ContactView]:
        """List an identity's contacts.

        Ordered by when the edge was created, oldest first, so callers can
        read it as "recently became contacts".

        Args:
            identity_id: The identity

        Returns:
            Contacts enriched with display name and avatar
        """
        with logfire.span("contact_service.list_contacts", identity_id=identity_id):
            edges = await self.contact_repository.find_for(identity_id)
            others = [edge.other(identity_id) for edge in edges]
            identities = (
                await self.identity_directory.find_many(others) if others else {}
            )

            contacts = []
            for edge, other_id in zip(edges, others):
                identity = identities.get(other_id)
                contacts.append(
                    ContactView(
                        identity_id=other_id,
                        display_name=identity.display_name if identity else "Unknown",
                        avatar_url=identity.avatar_url if identity else None,
                        chat_id=edge.chat_id,
                    )
                )

            logfire.info("Contacts listed", identity_id=identity_id, count=len(contacts))
            return contacts
