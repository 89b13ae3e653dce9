"""Rooms bounded context: rooms with a base nightly cost and a discount."""
from hotel_rooms.rooms.domain import (
    Discount,
    DiscountStrategy,
    NoDiscount,
    PercentageDiscount,
    Room,
    RoomAdded,
    RoomSnapshot,
    discount_for,
)
from hotel_rooms.rooms.registry import RoomRegistry
from hotel_rooms.rooms.application import AddRoom, GetAverageFinalCost, ListRooms
from hotel_rooms.rooms.module import rooms_module

__all__ = [
    "Discount",
    "DiscountStrategy",
    "NoDiscount",
    "PercentageDiscount",
    "Room",
    "RoomAdded",
    "RoomSnapshot",
    "discount_for",
    "RoomRegistry",
    "AddRoom",
    "ListRooms",
    "GetAverageFinalCost",
    "rooms_module",
]
