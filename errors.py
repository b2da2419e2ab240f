# errors.py
from typing import Optional


class HotelError(Exception):
    """Base class for every front-desk error; all of them are recoverable."""

    def __init__(self, message: str, room_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.room_number = room_number


class InvalidRoom(HotelError):
    def __init__(self, room_number: int):
        super().__init__(f"Room {room_number} does not exist (valid range 1-100)", room_number)


class AlreadyOccupied(HotelError):
    def __init__(self, room_number: int):
        super().__init__(f"Room {room_number} is already booked", room_number)


class RoomVacant(HotelError):
    def __init__(self, room_number: int):
        super().__init__(f"Room {room_number} is vacant or does not exist", room_number)


class PersistenceFailure(HotelError):
    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
