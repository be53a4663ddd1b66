"""Unit tests for chat history use cases."""

import pytest

from oxytalk.application.usecase.chat import (
    ClearHistoryRequest,
    ClearHistoryUseCase,
    GetHistoryRequest,
    GetHistoryUseCase,
)
from oxytalk.domain.error import ForbiddenError
from oxytalk.domain.model import Connection
from oxytalk.domain.service import MessageRouter
from oxytalk.domain.value import ChatId
from tests.conftest import make_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

CHAT = "chat:alice:bob"


class TestGetHistoryUseCase:
    """Tests for GetHistoryUseCase."""

    @pytest.mark.asyncio
    async def test_returns_stored_messages(self, unit_env):
        """History should list sent messages in camelCase on the wire."""
        # Arrange
        router = await unit_env.get(MessageRouter)
        alice = Connection()
        alice.authenticate(make_identity("alice"))
        message = router.send(alice, ChatId(CHAT), "hello")
        use_case = await unit_env.get(GetHistoryUseCase)

        # Act
        response = await use_case.execute(
            GetHistoryRequest(identity_id="bob", chat_id=CHAT)
        )

        # Assert
        assert [m.id for m in response.messages] == [str(message.id)]
        wire = response.model_dump(by_alias=True)
        assert wire["chatId"] == CHAT
        assert wire["messages"][0]["fromDisplayName"] == "Alice"

    @pytest.mark.asyncio
    async def test_non_participant_is_forbidden(self, unit_env):
        use_case = await unit_env.get(GetHistoryUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(GetHistoryRequest(identity_id="carol", chat_id=CHAT))


class TestClearHistoryUseCase:
    """Tests for ClearHistoryUseCase."""

    @pytest.mark.asyncio
    async def test_clear_empties_history(self, unit_env):
        # Arrange
        router = await unit_env.get(MessageRouter)
        alice = Connection()
        alice.authenticate(make_identity("alice"))
        router.send(alice, ChatId(CHAT), "hello")
        clear_use_case = await unit_env.get(ClearHistoryUseCase)
        history_use_case = await unit_env.get(GetHistoryUseCase)

        # Act
        response = await clear_use_case.execute(
            ClearHistoryRequest(identity_id="alice", chat_id=CHAT)
        )

        # Assert
        assert response.cleared is True
        history = await history_use_case.execute(
            GetHistoryRequest(identity_id="alice", chat_id=CHAT)
        )
        assert history.messages == []
