"""Environment fixtures for unit, integration and e2e tests.

Unmocked components talk to the docker-compose services (`just local-up`).
"""

import pytest_asyncio

from oxytalk.config import Settings
from oxytalk.util.di import Component
from tests.di import build_test_container


def create_env_fixture(
    unmock: set[Component] | None = None, settings: Settings | None = None
):
    """Make a fixture yielding a REQUEST-scoped container.

    The session provided to the request is committed when the fixture exits.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_send_invite(unit_env):
            service = await unit_env.get(InviteService)
            invite = await service.send_invite("alice", "bob")
            assert invite.status == InviteStatus.PENDING
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock, settings=settings)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _test_environment
