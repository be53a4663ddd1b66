"""Unit tests for RespondInviteUseCase."""

from uuid import uuid4

import pytest

from oxytalk.application.usecase.invite import (
    RespondInviteRequest,
    RespondInviteUseCase,
    SendInviteRequest,
    SendInviteUseCase,
)
from oxytalk.domain.error import InviteNotFoundError
from oxytalk.domain.repository import IdentityDirectory
from oxytalk.domain.value import InviteAction, InviteStatus
from tests.conftest import make_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestRespondInviteUseCase:
    """Tests for RespondInviteUseCase."""

    @pytest.mark.asyncio
    async def test_accept_returns_chat_id(self, unit_env):
        """Accepting should report the counterpart and the new chat id."""
        # Arrange
        directory = await unit_env.get(IdentityDirectory)
        await directory.save(make_identity("alice"))
        await directory.save(make_identity("bob"))
        send_use_case = await unit_env.get(SendInviteUseCase)
        respond_use_case = await unit_env.get(RespondInviteUseCase)
        sent = await send_use_case.execute(
            SendInviteRequest(identity_id="alice", to_identity_id="bob")
        )

        # Act
        response = await respond_use_case.execute(
            RespondInviteRequest(
                identity_id="bob", invite_id=sent.invite_id, action=InviteAction.ACCEPT
            )
        )

        # Assert
        assert response.status == InviteStatus.ACCEPTED
        assert response.counterpart_id == "alice"
        assert response.chat_id == "chat:alice:bob"

    @pytest.mark.asyncio
    async def test_malformed_invite_id(self, unit_env):
        """A malformed invite id is just an unknown invite."""
        use_case = await unit_env.get(RespondInviteUseCase)

        with pytest.raises(InviteNotFoundError):
            await use_case.execute(
                RespondInviteRequest(
                    identity_id="bob", invite_id="not-a-uuid", action=InviteAction.REJECT
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_invite_id(self, unit_env):
        use_case = await unit_env.get(RespondInviteUseCase)

        with pytest.raises(InviteNotFoundError):
            await use_case.execute(
                RespondInviteRequest(
                    identity_id="bob", invite_id=str(uuid4()), action=InviteAction.ACCEPT
                )
            )

    def test_request_accepts_camel_case(self):
        """Wire payloads arrive in camelCase."""
        request = RespondInviteRequest.model_validate(
            {"identityId": "bob", "inviteId": "x", "action": "reject"}
        )

        assert request.identity_id == "bob"
        assert request.action is InviteAction.REJECT
