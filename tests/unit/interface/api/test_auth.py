"""Unit tests for bearer authentication."""

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from oxytalk.application.usecase.identity import GetCurrentIdentityUseCase
from oxytalk.domain.error import UnauthenticatedError
from oxytalk.domain.repository import IdentityDirectory
from oxytalk.interface.api.auth import authenticate
from tests.conftest import make_identity, make_token
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_valid_bearer_token(self, unit_env):
        """Credentials for a known identity resolve to that identity."""
        directory = await unit_env.get(IdentityDirectory)
        alice = await directory.save(make_identity("alice"))
        use_case = await unit_env.get(GetCurrentIdentityUseCase)

        me = await authenticate(use_case, bearer(make_token(alice)))

        assert me.identity_id == "alice"

    @pytest.mark.asyncio
    async def test_missing_credentials(self, unit_env):
        """No Authorization header at all is unauthenticated."""
        use_case = await unit_env.get(GetCurrentIdentityUseCase)

        with pytest.raises(UnauthenticatedError):
            await authenticate(use_case, None)

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentIdentityUseCase)

        with pytest.raises(UnauthenticatedError):
            await authenticate(use_case, bearer("garbage"))
