"""Domain layer base classes: Entity, ValueObject, DomainEvent, Repository, errors."""
from hotel_rooms.domain.entity import Entity
from hotel_rooms.domain.value_object import ValueObject
from hotel_rooms.domain.events import DomainEvent, EventBus, InProcessEventDispatcher
from hotel_rooms.domain.repository import Repository
from hotel_rooms.domain.errors import (
    DuplicateRoomError,
    EmptyRoomListError,
    HotelError,
    InvalidValueError,
)

__all__ = [
    "Entity",
    "ValueObject",
    "DomainEvent",
    "EventBus",
    "InProcessEventDispatcher",
    "Repository",
    "HotelError",
    "InvalidValueError",
    "DuplicateRoomError",
    "EmptyRoomListError",
]
