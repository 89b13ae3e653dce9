"""One object = full bounded context «rooms»."""
import logging

from hotel_rooms.ddd import DomainModule

from .application import (
    AddRoom,
    AddRoomHandler,
    GetAverageFinalCost,
    GetAverageFinalCostHandler,
    ListRooms,
    ListRoomsHandler,
)
from .domain import RoomAdded
from .infrastructure import InMemoryRoomRepository, IRoomRepository
from .registry import RoomRegistry

logger = logging.getLogger(__name__)


def log_room_added(event: RoomAdded) -> None:
    logger.info(
        "Room %s added: base %.2f, final %.2f",
        event.identifier,
        event.base_cost,
        event.final_cost,
    )


rooms_module = (
    DomainModule("rooms")
    .repository(IRoomRepository, InMemoryRoomRepository)
    .bind(RoomRegistry)
    .command(AddRoom, AddRoomHandler)
    .query(ListRooms, ListRoomsHandler)
    .query(GetAverageFinalCost, GetAverageFinalCostHandler)
    .on_event(RoomAdded, log_room_added)
)
