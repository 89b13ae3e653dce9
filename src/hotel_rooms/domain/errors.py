"""Domain errors. Raised by domain code, caught only at the CLI boundary."""


class HotelError(Exception):
    """Base class for every recoverable domain error."""

    prefix = ""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"{self.prefix}: {message}" if self.prefix else message)


class InvalidValueError(HotelError, ValueError):
    """A supplied value violates a construction-time invariant."""

    prefix = "Invalid value"


class DuplicateRoomError(HotelError):
    """A room with the same identifier is already registered."""

    prefix = "Duplicate room"


class EmptyRoomListError(HotelError):
    """An aggregate was requested while no rooms are registered."""

    prefix = "Room list is empty"
