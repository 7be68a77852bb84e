from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional, Tuple

from hotelres.exceptions import FailureReason, ReservationError, ValidationError
from hotelres.models import Booking, Room, RoomType
from hotelres.services.payment_service import PaymentDecider, RandomPaymentSimulator

logger = logging.getLogger(__name__)


class Hotel:
    """
    Room inventory and the bookings made against it.

    Rooms and bookings are kept in insertion order. No two bookings for the
    same room may overlap on their [check_in, check_out) ranges.
    """

    def __init__(self, payment: Optional[PaymentDecider] = None):
        self._rooms: List[Room] = []
        self._bookings: List[Booking] = []
        self.payment: PaymentDecider = payment or RandomPaymentSimulator()

    # ------------------------------------
    # Rooms
    # ------------------------------------
    def add_room(self, room: Room) -> None:
        if self.get_room(room.id) is not None:
            raise ValidationError(f"Room {room.id} already exists")
        self._rooms.append(room)

    def get_room(self, room_id: int) -> Optional[Room]:
        for room in self._rooms:
            if room.id == room_id:
                return room
        return None

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return tuple(self._rooms)

    @property
    def bookings(self) -> Tuple[Booking, ...]:
        return tuple(self._bookings)

    # ------------------------------------
    # Availability
    # ------------------------------------
    def is_available(self, room_id: int, check_in: date, check_out: date) -> bool:
        """Callers make sure check_in is before check_out."""
        for booking in self._bookings:
            if booking.room_id == room_id and booking.overlaps(check_in, check_out):
                return False
        return True

    def search_available(
        self,
        room_type: Optional[RoomType],
        check_in: date,
        check_out: date,
    ) -> List[Room]:
        return [
            room
            for room in self._rooms
            if (room_type is None or room.room_type == room_type)
            and self.is_available(room.id, check_in, check_out)
        ]

    # ------------------------------------
    # Reservations
    # ------------------------------------
    def reserve(self, room_id: int, guest_name: str, check_in: date, check_out: date) -> Booking:
        """Books the room or raises ReservationError with the reason it could not."""
        room = self.get_room(room_id)
        if room is None:
            raise ReservationError(FailureReason.ROOM_NOT_FOUND, f"Room {room_id} does not exist")

        if not self.is_available(room_id, check_in, check_out):
            raise ReservationError(
                FailureReason.UNAVAILABLE,
                f"Room {room_id} is already booked between {check_in} and {check_out}",
            )

        nights = (check_out - check_in).days
        if nights <= 0:
            raise ReservationError(
                FailureReason.INVALID_DATES,
                f"Check-out {check_out} must be after check-in {check_in}",
            )

        amount = nights * room.price_per_night
        if not self.payment.decide(amount):
            raise ReservationError(FailureReason.PAYMENT_DECLINED, f"Payment of {amount:.2f} was declined")

        booking = Booking(
            room_id=room_id,
            guest_name=guest_name,
            check_in=check_in,
            check_out=check_out,
            amount_paid=amount,
        )
        self._bookings.append(booking)
        logger.info(f"Booking {booking.booking_id} created for room {room_id} ({nights} nights)")
        return booking

    def make_reservation(
        self,
        room_id: int,
        guest_name: str,
        check_in: date,
        check_out: date,
    ) -> Optional[Booking]:
        """Same as reserve() but every failure collapses to None."""
        try:
            return self.reserve(room_id, guest_name, check_in, check_out)
        except ReservationError as e:
            logger.info(f"Reservation for room {room_id} failed ({e.reason.value}): {e}")
            return None

    def cancel_booking(self, booking_id: str) -> bool:
        for index, booking in enumerate(self._bookings):
            if booking.booking_id == booking_id:
                del self._bookings[index]
                logger.info(f"Booking {booking_id} cancelled")
                return True
        return False

    def find_booking(self, booking_id: str) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.booking_id == booking_id:
                return booking
        return None

    # ------------------------------------
    # Snapshot
    # ------------------------------------
    def to_dict(self) -> Dict[str, list]:
        return {
            "rooms": [r.to_dict() for r in self._rooms],
            "bookings": [b.to_dict() for b in self._bookings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, list], payment: Optional[PaymentDecider] = None) -> Hotel:
        """Rebuilds a hotel, re-checking the room and overlap invariants."""
        hotel = cls(payment=payment)
        for room_data in data.get("rooms", []):
            hotel.add_room(Room.from_dict(room_data))
        for booking_data in data.get("bookings", []):
            booking = Booking.from_dict(booking_data)
            if hotel.get_room(booking.room_id) is None:
                raise ValidationError(f"Booking {booking.booking_id} references unknown room {booking.room_id}")
            if booking.nights <= 0:
                raise ValidationError(f"Booking {booking.booking_id} has an empty date range")
            if not hotel.is_available(booking.room_id, booking.check_in, booking.check_out):
                raise ValidationError(f"Booking {booking.booking_id} overlaps another booking")
            hotel._bookings.append(booking)
        return hotel
