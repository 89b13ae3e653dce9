"""
Hotel rooms — in-memory record keeper for room nightly costs and discounts.
Application is composed from module objects via app.register(module).
"""
from hotel_rooms.core import Application, Config, Container, HotelConfig, Module, load_config_from_env
from hotel_rooms.domain import DuplicateRoomError, EmptyRoomListError, HotelError, InvalidValueError
from hotel_rooms.rooms import RoomRegistry, rooms_module

__all__ = [
    "Application",
    "Config",
    "Container",
    "HotelConfig",
    "Module",
    "load_config_from_env",
    "HotelError",
    "InvalidValueError",
    "DuplicateRoomError",
    "EmptyRoomListError",
    "RoomRegistry",
    "rooms_module",
]
