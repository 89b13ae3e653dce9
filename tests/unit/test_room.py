"""Tests for the Room entity."""
import pytest

from hotel_rooms.domain import InvalidValueError
from hotel_rooms.rooms import NoDiscount, PercentageDiscount, Room


class TestRoomConstruction:
    def test_exposes_identifier_and_costs(self):
        room = Room("101", 1000, PercentageDiscount(10))
        assert room.identifier == "101"
        assert room.id == "101"
        assert room.base_cost == 1000.0
        assert room.final_cost == pytest.approx(900.0)

    def test_final_cost_without_discount_is_base_cost(self):
        assert Room("102", 500, NoDiscount()).final_cost == 500.0

    @pytest.mark.parametrize("base_cost", [0, -1, -0.01])
    def test_rejects_non_positive_base_cost(self, base_cost):
        with pytest.raises(InvalidValueError, match="base cost"):
            Room("101", base_cost, NoDiscount())

    def test_smallest_cent_is_accepted(self):
        assert Room("101", 0.01, NoDiscount()).base_cost == 0.01

    def test_rejects_empty_identifier(self):
        with pytest.raises(InvalidValueError, match="identifier"):
            Room("", 100, NoDiscount())

    def test_whitespace_identifier_is_left_to_the_caller(self):
        assert Room(" ", 100, NoDiscount()).identifier == " "

    def test_rejects_missing_strategy(self):
        with pytest.raises(InvalidValueError, match="strategy"):
            Room("101", 100, None)

    def test_invalid_value_is_also_value_error(self):
        with pytest.raises(ValueError):
            Room("101", 0, NoDiscount())


class TestRoomImmutability:
    def test_attributes_cannot_be_assigned(self):
        room = Room("101", 100, NoDiscount())
        with pytest.raises(AttributeError):
            room.base_cost = 50
        with pytest.raises(AttributeError):
            room.id = "999"
        assert room.base_cost == 100.0

    def test_snapshot_matches_room(self):
        snap = Room("A-12", 200, PercentageDiscount(25)).snapshot()
        assert (snap.identifier, snap.base_cost, snap.final_cost) == ("A-12", 200.0, 150.0)


class TestRoomIdentity:
    def test_equal_by_identifier(self):
        assert Room("101", 100, NoDiscount()) == Room("101", 300, PercentageDiscount(5))
        assert Room("101", 100, NoDiscount()) != Room("102", 100, NoDiscount())

    def test_hashable(self):
        assert len({Room("101", 100, NoDiscount()), Room("101", 200, NoDiscount())}) == 1
