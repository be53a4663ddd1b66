"""Dependency injection providers."""

from typing import Type

from oxytalk.util.di.application import ProdApplicationProvider
from oxytalk.util.di.base import Component, ProviderBase, get_provider
from oxytalk.util.di.core import ProdConfigProvider
from oxytalk.util.di.domain import ProdDomainProvider
from oxytalk.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Order is irrelevant to dishka; swappable components are listed by their base
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
