"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One inbound operation: check the viewer, call the services, shape the reply."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
