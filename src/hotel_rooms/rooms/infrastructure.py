"""Infrastructure: repository implementation for rooms."""
from typing import Iterator, Optional

from hotel_rooms.domain import Repository

from .domain import Room


class IRoomRepository(Repository[Room]):
    pass


class InMemoryRoomRepository(IRoomRepository):
    """Insertion-ordered store keyed by identifier; lives as long as the process."""

    def __init__(self) -> None:
        self._store: dict[str, Room] = {}

    def get(self, id: str) -> Optional[Room]:
        return self._store.get(id)

    def add(self, entity: Room) -> None:
        if entity.id in self._store:
            raise KeyError(entity.id)
        self._store[entity.id] = entity

    def __iter__(self) -> Iterator[Room]:
        return iter(list(self._store.values()))

    def __len__(self) -> int:
        return len(self._store)
