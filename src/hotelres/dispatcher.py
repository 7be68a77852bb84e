"""
Command values and the dispatcher that runs them.

The interactive shell only parses input into one of the command models below
and prints whatever the dispatcher returns.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from hotelres.exceptions import CommandError, ValidationError
from hotelres.hotel import Hotel
from hotelres.models import RoomType
from hotelres.store import HotelStore

logger = logging.getLogger(__name__)

BOOKING_FAILED_MESSAGE = "Booking failed (room may be unavailable or payment failed)."
NO_SUCH_BOOKING_MESSAGE = "No such booking."


# --- COMMAND SCHEMAS ---

class Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class ListRooms(Command):
    pass


class ListBookings(Command):
    pass


class SaveAndExit(Command):
    pass


class DateRangeCommand(Command):
    check_in: date = Field(description="First night (inclusive)")
    check_out: date = Field(description="Departure day (exclusive)")

    @model_validator(mode="after")
    def _check_range(self) -> "DateRangeCommand":
        if self.check_in >= self.check_out:
            raise ValueError("'From' must be before 'To'")
        return self


class SearchRooms(DateRangeCommand):
    room_type: Optional[RoomType] = Field(default=None, description="None searches every category")


class MakeReservation(DateRangeCommand):
    guest_name: str
    room_id: int


class CancelBooking(Command):
    booking_id: str


class ViewBooking(Command):
    booking_id: str


def build_command(command_cls: Type[Command], **values: Any) -> Command:
    """Validates raw values into a command, raising hotelres ValidationError on bad input."""
    try:
        return command_cls(**values)
    except PydanticValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ValidationError(messages) from e


@dataclass
class CommandResult:
    lines: List[str] = field(default_factory=list)
    exit: bool = False


class CommandDispatcher:
    """Runs already-parsed commands against a hotel and its store."""

    def __init__(self, hotel: Hotel, store: HotelStore):
        self.hotel = hotel
        self.store = store
        self._handlers: Dict[Type[Command], Callable[[Any], CommandResult]] = {
            ListRooms: self._list_rooms,
            SearchRooms: self._search_rooms,
            MakeReservation: self._make_reservation,
            CancelBooking: self._cancel_booking,
            ViewBooking: self._view_booking,
            ListBookings: self._list_bookings,
            SaveAndExit: self._save_and_exit,
        }

    def dispatch(self, command: Command) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise CommandError(f"Unknown command: {type(command).__name__}")
        logger.debug(f"Dispatching {command!r}")
        return handler(command)

    # ------------------------------------
    # Handlers
    # ------------------------------------
    def _list_rooms(self, command: ListRooms) -> CommandResult:
        return CommandResult(["Rooms:"] + [f"  {r}" for r in self.hotel.rooms])

    def _list_bookings(self, command: ListBookings) -> CommandResult:
        return CommandResult(["Bookings:"] + [f"  {b}" for b in self.hotel.bookings])

    def _search_rooms(self, command: SearchRooms) -> CommandResult:
        available = self.hotel.search_available(command.room_type, command.check_in, command.check_out)
        if not available:
            return CommandResult(["No rooms available for that range."])
        return CommandResult(["Available rooms:"] + [f"  {r}" for r in available])

    def _make_reservation(self, command: MakeReservation) -> CommandResult:
        booking = self.hotel.make_reservation(
            command.room_id,
            command.guest_name,
            command.check_in,
            command.check_out,
        )
        if booking is None:
            return CommandResult([BOOKING_FAILED_MESSAGE])
        return CommandResult([f"Booking successful: {booking}"])

    def _cancel_booking(self, command: CancelBooking) -> CommandResult:
        if self.hotel.cancel_booking(command.booking_id):
            return CommandResult(["Booking cancelled."])
        return CommandResult([NO_SUCH_BOOKING_MESSAGE])

    def _view_booking(self, command: ViewBooking) -> CommandResult:
        booking = self.hotel.find_booking(command.booking_id)
        if booking is None:
            return CommandResult([NO_SUCH_BOOKING_MESSAGE])
        return CommandResult([str(booking)])

    def _save_and_exit(self, command: SaveAndExit) -> CommandResult:
        if self.store.save(self.hotel):
            return CommandResult(["Hotel state saved."], exit=True)
        return CommandResult(["Failed to save hotel state (see log)."], exit=True)
