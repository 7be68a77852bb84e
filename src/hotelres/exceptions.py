"""Custom exceptions for hotelres."""
from __future__ import annotations

import enum


class HotelResError(Exception):
    """Base exception for all hotelres errors."""
    pass


class ConfigurationError(HotelResError):
    """Raised when configuration is invalid or missing."""
    pass


class DatabaseError(HotelResError):
    """Raised when the snapshot file cannot be read or written."""
    pass


class AdapterError(HotelResError):
    """Raised when an adapter cannot be selected or built."""
    pass


class ValidationError(HotelResError):
    """Raised when a record or command carries invalid values."""
    pass


class FailureReason(str, enum.Enum):
    ROOM_NOT_FOUND = "room_not_found"
    UNAVAILABLE = "unavailable"
    INVALID_DATES = "invalid_dates"
    PAYMENT_DECLINED = "payment_declined"


class ReservationError(HotelResError):
    """Raised when a reservation cannot be made; ``reason`` tells why."""

    def __init__(self, reason: FailureReason, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or reason.value)


class CommandError(HotelResError):
    """Raised when the dispatcher receives something it cannot execute."""
    pass
