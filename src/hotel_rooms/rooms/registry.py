"""RoomRegistry — the ordered, append-only collection of rooms for one run."""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from hotel_rooms.core.config import HotelConfig
from hotel_rooms.domain import DuplicateRoomError, EmptyRoomListError

from .domain import Room, RoomSnapshot, discount_for
from .infrastructure import InMemoryRoomRepository, IRoomRepository

logger = logging.getLogger(__name__)


class RoomRegistry:
    """
    Owns every Room. Identifiers are unique (exact, case-sensitive match).
    Rooms are never updated or removed.
    """

    def __init__(
        self,
        repository: IRoomRepository | None = None,
        config: HotelConfig | None = None,
    ) -> None:
        self._repo = repository if repository is not None else InMemoryRoomRepository()
        self._config = config if config is not None else HotelConfig()

    def add_room(self, identifier: str, base_cost: float, discount_percent: float = 0.0) -> None:
        """
        Register a new room.

        Raises DuplicateRoomError if the identifier is taken, InvalidValueError
        if the cost or discount is out of range. Overlong identifiers only log a warning.
        """
        limit = self._config.long_identifier_length
        if len(identifier) > limit:
            logger.warning("Room identifier is too long (%d > %d characters): %r", len(identifier), limit, identifier)

        if identifier in self:
            raise DuplicateRoomError(f"room '{identifier}' already exists")

        room = Room(identifier, base_cost, discount_for(discount_percent))
        self._repo.add(room)

    def average_final_cost(self) -> float:
        rooms = list(self._repo)
        if not rooms:
            raise EmptyRoomListError("nothing to average")
        return sum(room.final_cost for room in rooms) / len(rooms)

    def list_all(self) -> list[RoomSnapshot]:
        return [room.snapshot() for room in self._repo]

    def get(self, identifier: str) -> Optional[Room]:
        return self._repo.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self._repo.get(identifier) is not None

    def __iter__(self) -> Iterator[Room]:
        return iter(self._repo)

    def __len__(self) -> int:
        return len(self._repo)
