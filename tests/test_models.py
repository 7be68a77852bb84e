"""
Tests for the Room and Booking records.
"""
from datetime import date

import pytest

from hotelres.exceptions import ValidationError
from hotelres.models import Booking, Room, RoomType


class TestRoomType:

    @pytest.mark.parametrize("text,expected", [
        ("standard", RoomType.STANDARD),
        ("Deluxe", RoomType.DELUXE),
        (" SUITE ", RoomType.SUITE),
        ("none", None),
        ("", None),
        (None, None),
        ("penthouse", None),
    ])
    def test_parse(self, text, expected):
        assert RoomType.parse(text) is expected


class TestRoom:

    def test_str_matches_listing_format(self):
        assert str(Room(101, RoomType.STANDARD, 2000)) == "Room{id=101, type=STANDARD, price=2000.00}"

    def test_non_positive_price_is_rejected(self):
        with pytest.raises(ValidationError):
            Room(101, RoomType.STANDARD, 0)

    def test_room_is_immutable(self):
        room = Room(101, RoomType.STANDARD, 2000)
        with pytest.raises(AttributeError):
            room.price_per_night = 10

    def test_from_dict_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            Room.from_dict({"id": 1, "room_type": "CASTLE", "price_per_night": 10})

    @pytest.mark.parametrize("price", ["nan", "inf", "-inf"])
    def test_from_dict_rejects_non_finite_price(self, price):
        with pytest.raises(ValidationError):
            Room.from_dict({"id": 1, "room_type": "SUITE", "price_per_night": price})

    def test_to_dict(self):
        assert Room(301, RoomType.SUITE, 6000.0).to_dict() == {
            "id": 301,
            "room_type": "SUITE",
            "price_per_night": 6000.0,
        }


class TestBooking:

    def make(self, **overrides):
        values = dict(
            room_id=101,
            guest_name="Alice",
            check_in=date(2024, 1, 1),
            check_out=date(2024, 1, 3),
            amount_paid=4000.0,
        )
        values.update(overrides)
        return Booking(**values)

    def test_generates_unique_ids(self):
        assert self.make().booking_id != self.make().booking_id

    def test_nights(self):
        assert self.make().nights == 2

    def test_overlap_is_half_open(self):
        booking = self.make()
        assert booking.overlaps(date(2024, 1, 2), date(2024, 1, 4))
        assert booking.overlaps(date(2023, 12, 30), date(2024, 1, 5))
        assert not booking.overlaps(date(2024, 1, 3), date(2024, 1, 5))
        assert not booking.overlaps(date(2023, 12, 30), date(2024, 1, 1))

    def test_str(self):
        booking = self.make(booking_id="abc")
        assert str(booking) == "Booking{id=abc, room=101, guest='Alice', from=2024-01-01, to=2024-01-03, paid=4000.00}"

    def test_from_dict_reads_iso_dates(self):
        booking = self.make()
        restored = Booking.from_dict(booking.to_dict())
        assert restored == booking
        assert restored.check_in == date(2024, 1, 1)

    def test_from_dict_rejects_bad_date(self):
        data = self.make().to_dict()
        data["check_in"] = "01/01/2024"
        with pytest.raises(ValidationError):
            Booking.from_dict(data)

    def test_from_dict_rejects_missing_field(self):
        data = self.make().to_dict()
        del data["guest_name"]
        with pytest.raises(ValidationError):
            Booking.from_dict(data)
