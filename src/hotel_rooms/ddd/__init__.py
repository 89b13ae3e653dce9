from hotel_rooms.ddd.commands import Command, Query
from hotel_rooms.ddd.domain_module import DomainModule

__all__ = ["Command", "Query", "DomainModule"]
