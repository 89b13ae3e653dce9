from hotel_rooms.core.app import Application
from hotel_rooms.core.container import Container
from hotel_rooms.core.module import Module
from hotel_rooms.core.config import Config, HotelConfig, load_config_from_env

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "HotelConfig",
    "load_config_from_env",
]
