from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict
import uuid

from hotelres.exceptions import ValidationError


def new_booking_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Booking:
    """A paid stay in one room over the half-open range [check_in, check_out)."""

    room_id: int
    guest_name: str
    check_in: date
    check_out: date
    amount_paid: float
    booking_id: str = field(default_factory=new_booking_id)

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def overlaps(self, check_in: date, check_out: date) -> bool:
        return check_in < self.check_out and self.check_in < check_out

    def __str__(self) -> str:
        return (
            f"Booking{{id={self.booking_id}, room={self.room_id}, guest='{self.guest_name}', "
            f"from={self.check_in.isoformat()}, to={self.check_out.isoformat()}, paid={self.amount_paid:.2f}}}"
        )

    # ------------------------------------
    # Serialization
    # ------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "booking_id": self.booking_id,
            "room_id": self.room_id,
            "guest_name": self.guest_name,
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "amount_paid": self.amount_paid,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Booking:
        try:
            return cls(
                booking_id=str(data["booking_id"]),
                room_id=int(data["room_id"]),
                guest_name=str(data["guest_name"]),
                check_in=date.fromisoformat(data["check_in"]),
                check_out=date.fromisoformat(data["check_out"]),
                amount_paid=float(data["amount_paid"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Malformed booking record {data!r}: {e}") from e
