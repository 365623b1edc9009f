"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from doccomments.config import Settings
from doccomments.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Names of all components that ship a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and base.__mock_component__
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit tests - in-memory tables, recording mailer
        container = build_test_container()

        # Integration tests - PostgreSQL at DATABASE__URL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    provider_instances = []
    for base in PROVIDERS:
        component_name = base.__mock_component__
        use_mock = bool(component_name) and component_name not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances, context={Settings: Settings()})
