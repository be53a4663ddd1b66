"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from oxytalk.config import Settings
from oxytalk.util.di import PROVIDERS
from oxytalk.util.di.base import Component, ProviderBase, get_provider
from oxytalk.util.di.core import ProdConfigProvider


def mockable_components() -> set[Component]:
    """Names of the components that have an in-memory implementation slot."""
    return {base.__mock_component__ for base in PROVIDERS if base.is_component()}


def create_container(
    settings: Settings | None = None, mock: Iterable[Component] = ()
) -> AsyncContainer:
    """Build the application container.

    Args:
        settings: Settings to use instead of reading the environment
        mock: Components to back with their in-memory implementation

    Raises:
        ValueError: On an unknown component name
    """
    mocked = set(mock)
    unknown = mocked - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers: list[ProviderBase] = []
    for base in PROVIDERS:
        if base is ProdConfigProvider:
            providers.append(ProdConfigProvider(settings))
            continue
        use_mock = base.__mock_component__ in mocked
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    setup_dishka(container, app)
