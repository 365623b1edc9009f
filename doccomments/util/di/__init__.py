"""Dependency injection wiring.

PROVIDERS lists one entry per concern. An entry with subclasses is a
swappable component (mailer, persistence); get_provider picks its production
or mock flavour. An entry without subclasses is used as is.
"""

from typing import Type

from doccomments.util.di.application import ProdApplicationProvider
from doccomments.util.di.base import Component, ProviderBase
from doccomments.util.di.core import ProdConfigProvider
from doccomments.util.di.domain import ProdDomainProvider
from doccomments.util.di.infrastructure import (
    MailerProvider,
    PersistenceProvider,
    ProdMailerProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    MailerProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the provider class to instantiate.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the test flavour of a swappable component

    Returns:
        Provider class

    Raises:
        ValueError: If the component has no flavour of the requested kind
            (mock flavours only exist once tests.di is imported)
    """
    flavours = base.__subclasses__()
    if not flavours:
        return base

    for flavour in flavours:
        if flavour.__is_mock__ == use_mock:
            return flavour

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} provider for component {base.__mock_component__!r}")


__all__ = [
    "PROVIDERS",
    "Component",
    "MailerProvider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
