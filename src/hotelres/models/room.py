from __future__ import annotations
from dataclasses import dataclass
import math
from enum import Enum
from typing import Any, Dict, Optional

from hotelres.exceptions import ValidationError


class RoomType(Enum):
    STANDARD = "STANDARD"
    DELUXE = "DELUXE"
    SUITE = "SUITE"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional[RoomType]:
        """Case-insensitive lookup. Empty, 'none' or unknown text gives None (no filter)."""
        if not text:
            return None
        try:
            return cls[text.strip().upper()]
        except KeyError:
            return None


@dataclass(frozen=True)
class Room:
    """Hotel room. Created once at seed time and never changed."""

    id: int
    room_type: RoomType
    price_per_night: float

    def __post_init__(self) -> None:
        if not isinstance(self.room_type, RoomType):
            raise ValidationError(f"Invalid room type: {self.room_type!r}")
        if not (math.isfinite(self.price_per_night) and self.price_per_night > 0):
            raise ValidationError(f"Room {self.id}: price per night must be positive, got {self.price_per_night}")

    def __str__(self) -> str:
        return f"Room{{id={self.id}, type={self.room_type.value}, price={self.price_per_night:.2f}}}"

    # ------------------------------------
    # Serialization
    # ------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "room_type": self.room_type.value,
            "price_per_night": self.price_per_night,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Room:
        try:
            return cls(
                id=int(data["id"]),
                room_type=RoomType(data["room_type"]),
                price_per_night=float(data["price_per_night"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Malformed room record {data!r}: {e}") from e
