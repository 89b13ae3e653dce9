"""Repository — interface for entity storage."""
from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Repository interface: get by id, add new, iterate in insertion order."""

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        ...

    @abstractmethod
    def add(self, entity: T) -> None:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
