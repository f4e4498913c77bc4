"""Dependency injection module."""

from typing import Type

from graphreview.util.di.application import ProdApplicationProvider
from graphreview.util.di.base import Component, ProviderBase
from graphreview.util.di.core import ProdConfigProvider
from graphreview.util.di.domain import ProdDomainProvider
from graphreview.util.di.infrastructure import EmailProvider, PersistenceProvider

# Settings first; email and persistence are swapped for mocks in tests
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EmailProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
]
