"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components whose providers come in a production and a test flavour
Component = Literal["mailer", "persistence"]


class ProviderBase(Provider):
    """Provider that knows which swappable component it provides.

    Attributes:
        __mock_component__: Component replaced in tests, None if never swapped
        __is_mock__: True for the in-memory / logging flavour used by tests
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
