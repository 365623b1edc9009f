"""Bases for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, compared by value, usable as a dict key."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Value object around one primitive, e.g. Domain("touch-2").

    Serializes to the bare primitive; the wrapped value is `.root`.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
