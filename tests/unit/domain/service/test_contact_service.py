"""Unit tests for ContactService."""

import pytest

from oxytalk.domain.repository import IdentityDirectory
from oxytalk.domain.service import ContactService
from oxytalk.domain.value import IdentityId, derive_chat_id
from tests.conftest import make_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

ALICE = IdentityId("alice")
BOB = IdentityId("bob")
CAROL = IdentityId("carol")


class TestContactRelation:
    """Tests for adding and checking contacts."""

    @pytest.mark.asyncio
    async def test_relation_is_symmetric(self, unit_env):
        """An edge added one way should be visible both ways."""
        contact_service = await unit_env.get(ContactService)

        await contact_service.add_contact(BOB, ALICE)

        assert await contact_service.are_contacts(ALICE, BOB)
        assert await contact_service.are_contacts(BOB, ALICE)
        assert not await contact_service.are_contacts(ALICE, CAROL)

    @pytest.mark.asyncio
    async def test_add_is_idempotent(self, unit_env):
        """Adding the same pair twice should create one edge."""
        contact_service = await unit_env.get(ContactService)

        assert await contact_service.add_contact(ALICE, BOB) is True
        assert await contact_service.add_contact(BOB, ALICE) is False

        assert len(await contact_service.list_contacts(ALICE)) == 1

    @pytest.mark.asyncio
    async def test_identity_is_never_its_own_contact(self, unit_env):
        """The relation is irreflexive."""
        contact_service = await unit_env.get(ContactService)

        assert not await contact_service.are_contacts(ALICE, ALICE)

    @pytest.mark.asyncio
    async def test_check_discloses_chat_id_to_contacts_only(self, unit_env):
        """Non-contacts should not learn the chat id."""
        contact_service = await unit_env.get(ContactService)
        await contact_service.add_contact(ALICE, BOB)

        contact = await contact_service.check_contact(ALICE, BOB)
        stranger = await contact_service.check_contact(ALICE, CAROL)

        assert contact.is_contact is True
        assert contact.chat_id == derive_chat_id(ALICE, BOB)
        assert stranger.is_contact is False
        assert stranger.chat_id is None


class TestListContacts:
    """Tests for list_contacts method."""

    @pytest.mark.asyncio
    async def test_lists_in_creation_order_with_profiles(self, unit_env):
        """Contacts should come oldest first, enriched from the directory."""
        # Arrange
        directory = await unit_env.get(IdentityDirectory)
        await directory.save(make_identity("bob", "Bob", "https://img/bob.png"))
        await directory.save(make_identity("carol", "Carol"))
        contact_service = await unit_env.get(ContactService)
        await contact_service.add_contact(ALICE, CAROL)
        await contact_service.add_contact(BOB, ALICE)

        # Act
        contacts = await contact_service.list_contacts(ALICE)

        # Assert
        assert [c.identity_id for c in contacts] == [CAROL, BOB]
        assert contacts[1].display_name == "Bob"
        assert contacts[1].avatar_url == "https://img/bob.png"
        assert contacts[1].chat_id == derive_chat_id(ALICE, BOB)

    @pytest.mark.asyncio
    async def test_unknown_contact_profile(self, unit_env):
        """A contact missing from the directory is still listed."""
        contact_service = await unit_env.get(ContactService)
        await contact_service.add_contact(ALICE, BOB)

        contacts = await contact_service.list_contacts(ALICE)

        assert contacts[0].display_name == "Unknown"

    @pytest.mark.asyncio
    async def test_no_contacts(self, unit_env):
        contact_service = await unit_env.get(ContactService)

        assert await contact_service.list_contacts(ALICE) == []
