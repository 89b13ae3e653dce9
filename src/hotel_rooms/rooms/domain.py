"""Rooms domain: discount strategies, the Room entity, snapshots and events."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from hotel_rooms.domain import DomainEvent, Entity, InvalidValueError, ValueObject


@runtime_checkable
class DiscountStrategy(Protocol):
    """Turns a base cost into a final cost. Pure; no state changes after construction."""

    def compute_cost(self, base_cost: float) -> float:
        ...


@dataclass(frozen=True)
class NoDiscount(ValueObject):
    def compute_cost(self, base_cost: float) -> float:
        return base_cost


@dataclass(frozen=True)
class PercentageDiscount(ValueObject):
    """Percent off the base cost; 0 <= percent < 100."""

    percent: float

    def __post_init__(self) -> None:
        if not self.percent >= 0.0:
            raise InvalidValueError("discount percent must be >= 0")
        if not self.percent < 100.0:
            raise InvalidValueError("discount percent must be < 100")

    def compute_cost(self, base_cost: float) -> float:
        return base_cost * (1.0 - self.percent / 100.0)


Discount = Union[NoDiscount, PercentageDiscount]


def discount_for(percent: float) -> Discount:
    """Exactly 0 means no discount; anything else must be a valid percentage."""
    if percent == 0.0:
        return NoDiscount()
    return PercentageDiscount(percent)


class Room(Entity):
    """
    One hotel room's pricing record. The identifier is the entity id.
    Read-only after construction; final_cost is computed on each access.
    """

    def __init__(self, identifier: str, base_cost: float, discount: DiscountStrategy | None) -> None:
        if not identifier:
            raise InvalidValueError("room identifier must not be empty")
        if not base_cost > 0.0:
            raise InvalidValueError("base cost must be > 0")
        if discount is None:
            raise InvalidValueError("discount strategy must be set")
        object.__setattr__(self, "id", identifier)
        object.__setattr__(self, "_base_cost", float(base_cost))
        object.__setattr__(self, "_discount", discount)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def identifier(self) -> str:
        return self.id

    @property
    def base_cost(self) -> float:
        return self._base_cost

    @property
    def discount(self) -> DiscountStrategy:
        return self._discount

    @property
    def final_cost(self) -> float:
        return self._discount.compute_cost(self._base_cost)

    def snapshot(self) -> RoomSnapshot:
        return RoomSnapshot(self.id, self._base_cost, self.final_cost)

    def __repr__(self) -> str:
        return f"Room(identifier={self.id!r}, base_cost={self._base_cost!r}, discount={self._discount!r})"


@dataclass(frozen=True)
class RoomSnapshot(ValueObject):
    """Read-only row of the room listing."""

    identifier: str
    base_cost: float
    final_cost: float


@dataclass(frozen=True)
class RoomAdded(DomainEvent):
    identifier: str
    base_cost: float
    final_cost: float
