"""Application layer: commands, queries, handlers."""
from __future__ import annotations

from dataclasses import dataclass

from hotel_rooms.ddd import Command, Query
from hotel_rooms.domain import EventBus

from .domain import RoomAdded, RoomSnapshot
from .registry import RoomRegistry


@dataclass(frozen=True)
class AddRoom(Command):
    identifier: str
    base_cost: float
    discount_percent: float = 0.0


@dataclass(frozen=True)
class ListRooms(Query):
    pass


@dataclass(frozen=True)
class GetAverageFinalCost(Query):
    pass


class AddRoomHandler:
    def __init__(self, registry: RoomRegistry, event_bus: EventBus):
        self._registry = registry
        self._event_bus = event_bus

    def __call__(self, cmd: AddRoom) -> str:
        self._registry.add_room(cmd.identifier, cmd.base_cost, cmd.discount_percent)
        room = self._registry.get(cmd.identifier)
        self._event_bus.publish(RoomAdded(room.identifier, room.base_cost, room.final_cost))
        return room.identifier


class ListRoomsHandler:
    def __init__(self, registry: RoomRegistry):
        self._registry = registry

    def __call__(self, query: ListRooms) -> list[RoomSnapshot]:
        return self._registry.list_all()


class GetAverageFinalCostHandler:
    def __init__(self, registry: RoomRegistry):
        self._registry = registry

    def __call__(self, query: GetAverageFinalCost) -> float:
        return self._registry.average_final_cost()
