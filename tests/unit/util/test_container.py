"""Container assembly: settings overrides and component selection."""

import pytest

from oxytalk.config import MessagingSettings, Settings
from oxytalk.domain.repository import MessageRepository
from oxytalk.persistence.repository.inmemory import InMemoryMessageRepository
from oxytalk.util.di import PersistenceProvider, ProdConfigProvider, get_provider
from oxytalk.util.di.container import create_container, mockable_components
from tests.di import MockPersistenceProvider, build_test_container


def test_persistence_is_the_only_swappable_component():
    assert mockable_components() == {"persistence"}


def test_get_provider_selects_by_kind():
    assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
    assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider


def test_unknown_component_is_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        create_container(mock={"email"})

    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"email"})


@pytest.mark.asyncio
async def test_settings_override_reaches_providers():
    settings = Settings(
        messaging=MessagingSettings(persist_attempts=5, persist_retry_delay_seconds=0)
    )
    container = build_test_container(settings=settings)
    try:
        assert await container.get(Settings) is settings
        messaging = await container.get(MessagingSettings)
        assert messaging.persist_attempts == 5
        assert messaging.persist_retry_delay_seconds == 0
    finally:
        await container.close()


@pytest.mark.asyncio
async def test_mocked_persistence_is_in_memory():
    container = create_container(mock={"persistence"})
    try:
        repository = await container.get(MessageRepository)
        assert isinstance(repository, InMemoryMessageRepository)
    finally:
        await container.close()
