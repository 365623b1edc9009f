"""Formatter interface."""

from abc import ABC, abstractmethod


class Formatter(ABC):
    """Renders raw comment text into HTML.

    Implementations must be pure: same input, same output, no side effects.
    """

    @abstractmethod
    def render(self, content: str) -> str:
        """Render raw content to HTML."""
        pass
