from .room import Room, RoomType
from .booking import Booking

__all__ = [
    "Room",
    "RoomType",
    "Booking",
]
