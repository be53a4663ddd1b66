"""Unit tests for InviteService."""

import asyncio
from uuid import uuid4

import pytest

from oxytalk.domain.error import (
    AlreadyContactsError,
    InviteNotFoundError,
    InvitePendingError,
    NotFoundError,
    SelfInviteError,
)
from oxytalk.domain.repository import (
    ContactRepository,
    IdentityDirectory,
    InviteRepository,
    MessageRepository,
)
from oxytalk.domain.service import ContactService, InviteService
from oxytalk.domain.value import (
    IdentityId,
    InviteAction,
    InviteId,
    InviteStatus,
    derive_chat_id,
)
from tests.conftest import make_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

ALICE = IdentityId("alice")
BOB = IdentityId("bob")
CAROL = IdentityId("carol")


async def seed(env, *identity_ids: str) -> None:
    directory = await env.get(IdentityDirectory)
    for identity_id in identity_ids:
        await directory.save(make_identity(identity_id))


class TestSendInvite:
    """Tests for send_invite method."""

    @pytest.mark.asyncio
    async def test_send_invite_success(self, unit_env):
        """Sending an invite should store it as pending."""
        # Arrange
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)

        # Act
        invite = await invite_service.send_invite(ALICE, BOB)

        # Assert
        assert invite.from_identity == ALICE
        assert invite.to_identity == BOB
        assert invite.status == InviteStatus.PENDING
        assert invite.responded_at is None
        assert await invite_repo.find_by_id(invite.id) == invite

    @pytest.mark.asyncio
    async def test_self_invite_is_rejected(self, unit_env):
        """Inviting oneself should fail before anything else is checked."""
        await seed(unit_env, "alice")
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(SelfInviteError):
            await invite_service.send_invite(ALICE, ALICE)

    @pytest.mark.asyncio
    async def test_self_invite_wins_over_unknown_identity(self, unit_env):
        """An unknown identity inviting itself is still a self invite."""
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(SelfInviteError):
            await invite_service.send_invite(CAROL, CAROL)

    @pytest.mark.asyncio
    async def test_unknown_invitee_raises_not_found(self, unit_env):
        """Inviting an identity that does not exist should fail."""
        await seed(unit_env, "alice")
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(NotFoundError):
            await invite_service.send_invite(ALICE, BOB)

    @pytest.mark.asyncio
    async def test_already_contacts(self, unit_env):
        """Inviting an existing contact should fail."""
        await seed(unit_env, "alice", "bob")
        contact_service = await unit_env.get(ContactService)
        invite_service = await unit_env.get(InviteService)
        await contact_service.add_contact(ALICE, BOB)

        with pytest.raises(AlreadyContactsError):
            await invite_service.send_invite(BOB, ALICE)

    @pytest.mark.asyncio
    async def test_already_contacts_wins_over_pending(self, unit_env):
        """Contacts are reported before a leftover pending invite."""
        await seed(unit_env, "alice", "bob")
        contact_service = await unit_env.get(ContactService)
        invite_service = await unit_env.get(InviteService)
        await invite_service.send_invite(ALICE, BOB)
        await contact_service.add_contact(ALICE, BOB)

        with pytest.raises(AlreadyContactsError):
            await invite_service.send_invite(ALICE, BOB)

    @pytest.mark.asyncio
    async def test_pending_invite_blocks_same_direction(self, unit_env):
        """A second invite to the same identity should fail while pending."""
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        await invite_service.send_invite(ALICE, BOB)

        with pytest.raises(InvitePendingError):
            await invite_service.send_invite(ALICE, BOB)

    @pytest.mark.asyncio
    async def test_pending_invite_blocks_reverse_direction(self, unit_env):
        """The invitee cannot counter-invite while an invite is pending."""
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        await invite_service.send_invite(ALICE, BOB)

        with pytest.raises(InvitePendingError):
            await invite_service.send_invite(BOB, ALICE)

    @pytest.mark.asyncio
    async def test_concurrent_sends_create_one_invite(self, unit_env):
        """Two concurrent sends for one pair should leave a single pending invite."""
        # Arrange
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)

        # Act
        results = await asyncio.gather(
            invite_service.send_invite(ALICE, BOB),
            invite_service.send_invite(BOB, ALICE),
            return_exceptions=True,
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], InvitePendingError)
        assert await invite_repo.find_pending_between(ALICE, BOB) is not None

    @pytest.mark.asyncio
    async def test_new_invite_allowed_after_rejection(self, unit_env):
        """A rejected invite does not block a fresh one."""
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        first = await invite_service.send_invite(ALICE, BOB)
        await invite_service.respond_invite(first.id, BOB, InviteAction.REJECT)

        second = await invite_service.send_invite(BOB, ALICE)

        assert second.id != first.id
        assert second.status == InviteStatus.PENDING


class TestRespondInvite:
    """Tests for respond_invite method."""

    @pytest.mark.asyncio
    async def test_accept_creates_contact_and_channel(self, unit_env):
        """Accepting should make both sides contacts and open their channel."""
        # Arrange
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        contact_service = await unit_env.get(ContactService)
        message_repo = await unit_env.get(MessageRepository)
        invite = await invite_service.send_invite(ALICE, BOB)

        # Act
        result = await invite_service.respond_invite(invite.id, BOB, InviteAction.ACCEPT)

        # Assert
        assert result.invite.status == InviteStatus.ACCEPTED
        assert result.invite.responded_at is not None
        assert result.counterpart == ALICE
        assert result.chat_id == derive_chat_id(ALICE, BOB)
        assert await contact_service.are_contacts(ALICE, BOB)
        assert await contact_service.are_contacts(BOB, ALICE)
        assert await message_repo.channel_exists(result.chat_id)

    @pytest.mark.asyncio
    async def test_reject_leaves_no_contact(self, unit_env):
        """Rejecting should close the invite without a contact edge."""
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        contact_service = await unit_env.get(ContactService)
        invite = await invite_service.send_invite(ALICE, BOB)

        result = await invite_service.respond_invite(invite.id, BOB, InviteAction.REJECT)

        assert result.invite.status == InviteStatus.REJECTED
        assert result.chat_id is None
        assert not await contact_service.are_contacts(ALICE, BOB)

    @pytest.mark.asyncio
    async def test_unknown_invite(self, unit_env):
        """Responding to an unknown invite should fail."""
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(InviteNotFoundError):
            await invite_service.respond_invite(InviteId(uuid4()), BOB, InviteAction.ACCEPT)

    @pytest.mark.asyncio
    async def test_only_invitee_can_respond(self, unit_env):
        """Neither the inviter nor a third party may respond."""
        await seed(unit_env, "alice", "bob", "carol")
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.send_invite(ALICE, BOB)

        for responder in (ALICE, CAROL):
            with pytest.raises(InviteNotFoundError):
                await invite_service.respond_invite(
                    invite.id, responder, InviteAction.ACCEPT
                )

        invite_repo = await unit_env.get(InviteRepository)
        stored = await invite_repo.find_by_id(invite.id)
        assert stored.status == InviteStatus.PENDING

    @pytest.mark.asyncio
    async def test_terminal_states_are_final(self, unit_env):
        """Accepting after a rejection should fail and leave no contact."""
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        contact_service = await unit_env.get(ContactService)
        invite = await invite_service.send_invite(ALICE, BOB)
        await invite_service.respond_invite(invite.id, BOB, InviteAction.REJECT)

        with pytest.raises(InviteNotFoundError):
            await invite_service.respond_invite(invite.id, BOB, InviteAction.ACCEPT)

        assert not await contact_service.are_contacts(ALICE, BOB)

    @pytest.mark.asyncio
    async def test_concurrent_accepts_succeed_once(self, unit_env):
        """Only one of two racing responses should win, with one edge."""
        # Arrange
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        contact_repo = await unit_env.get(ContactRepository)
        invite = await invite_service.send_invite(ALICE, BOB)

        # Act
        results = await asyncio.gather(
            invite_service.respond_invite(invite.id, BOB, InviteAction.ACCEPT),
            invite_service.respond_invite(invite.id, BOB, InviteAction.ACCEPT),
            return_exceptions=True,
        )

        # Assert
        successes = [r for r in results if not isinstance(r, Exception)]
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert isinstance(failures[0], InviteNotFoundError)
        assert len(await contact_repo.find_for(ALICE)) == 1


class TestListIncoming:
    """Tests for list_incoming method."""

    @pytest.mark.asyncio
    async def test_lists_pending_oldest_first(self, unit_env):
        """Only pending invites addressed to the identity are listed."""
        # Arrange
        await seed(unit_env, "alice", "bob", "carol")
        directory = await unit_env.get(IdentityDirectory)
        await directory.save(make_identity("carol", "Carol C", "https://img/c.png"))
        invite_service = await unit_env.get(InviteService)
        first = await invite_service.send_invite(ALICE, BOB)
        second = await invite_service.send_invite(CAROL, BOB)
        await invite_service.send_invite(ALICE, CAROL)

        # Act
        incoming = await invite_service.list_incoming(BOB)

        # Assert
        assert [item.invite_id for item in incoming] == [first.id, second.id]
        assert incoming[1].from_display_name == "Carol C"
        assert incoming[1].from_avatar_url == "https://img/c.png"

    @pytest.mark.asyncio
    async def test_responded_invites_disappear(self, unit_env):
        """Accepted invites are no longer incoming."""
        await seed(unit_env, "alice", "bob")
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.send_invite(ALICE, BOB)
        await invite_service.respond_invite(invite.id, BOB, InviteAction.ACCEPT)

        assert await invite_service.list_incoming(BOB) == []
