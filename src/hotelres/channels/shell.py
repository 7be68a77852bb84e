"""
Interactive menu shell.

Reads one menu choice at a time, turns the answers into command values and
prints what the dispatcher returns. End of input behaves like "Save & Exit".
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Tuple

import click

from hotelres.dispatcher import (
    CancelBooking,
    Command,
    CommandDispatcher,
    ListBookings,
    ListRooms,
    MakeReservation,
    SaveAndExit,
    SearchRooms,
    ViewBooking,
    build_command,
)
from hotelres.exceptions import HotelResError, ValidationError
from hotelres.models import RoomType

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

MENU = """
--- Hotel Reservation System ---
1) List rooms
2) Search available rooms
3) Make reservation
4) Cancel reservation
5) View booking details
6) List bookings
7) Save & Exit"""


# ------------------------------------
# Prompts
# ------------------------------------
def _ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False).strip()


def _parse_date(text: str) -> date:
    return datetime.strptime(text, DATE_FORMAT).date()


def read_date_range() -> Tuple[date, date]:
    """Re-prompts until both dates parse and 'To' is after 'From'."""
    while True:
        raw_from = _ask("From (yyyy-MM-dd)")
        raw_to = _ask("To (yyyy-MM-dd) (exclusive)")
        try:
            check_in = _parse_date(raw_from)
            check_out = _parse_date(raw_to)
        except ValueError:
            click.echo("Invalid date format, please use yyyy-MM-dd.")
            continue
        if check_in >= check_out:
            click.echo("'From' must be before 'To'. Try again.")
            continue
        return check_in, check_out


def read_room_type() -> Optional[RoomType]:
    return RoomType.parse(_ask("Filter by room type? (standard/deluxe/suite/none)"))


def read_room_id() -> int:
    raw = _ask("Enter room id to book")
    try:
        return int(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid room id: {raw!r}") from e


# ------------------------------------
# Menu options
# ------------------------------------
def _search_command() -> Command:
    room_type = read_room_type()
    check_in, check_out = read_date_range()
    return build_command(SearchRooms, room_type=room_type, check_in=check_in, check_out=check_out)


def _reservation_command() -> Command:
    guest_name = _ask("Guest name")
    check_in, check_out = read_date_range()
    room_id = read_room_id()
    return build_command(
        MakeReservation,
        guest_name=guest_name,
        check_in=check_in,
        check_out=check_out,
        room_id=room_id,
    )


def _cancel_command() -> Command:
    return build_command(CancelBooking, booking_id=_ask("Booking id to cancel"))


def _view_command() -> Command:
    return build_command(ViewBooking, booking_id=_ask("Booking id"))


OPTIONS = {
    "1": lambda: ListRooms(),
    "2": _search_command,
    "3": _reservation_command,
    "4": _cancel_command,
    "5": _view_command,
    "6": lambda: ListBookings(),
    "7": lambda: SaveAndExit(),
}


def _show(lines) -> None:
    for line in lines:
        click.echo(line)


def run_shell(dispatcher: CommandDispatcher) -> None:
    running = True
    while running:
        click.echo(MENU)
        try:
            choice = _ask("Choose")
            build = OPTIONS.get(choice)
            if build is None:
                click.echo("Invalid option.")
                continue
            result = dispatcher.dispatch(build())
        except click.Abort:
            logger.info("Input closed, saving before exit")
            result = dispatcher.dispatch(SaveAndExit())
        except HotelResError as e:
            click.echo(f"Error: {e}")
            continue
        _show(result.lines)
        running = not result.exit
