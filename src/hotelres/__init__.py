"""hotelres - single-process hotel reservation manager"""

__version__ = "0.1.0"

# Exceptions
from .exceptions import (
    HotelResError,
    ConfigurationError,
    DatabaseError,
    AdapterError,
    ValidationError,
    ReservationError,
    FailureReason,
    CommandError,
)

# Records and core
from .models import Room, RoomType, Booking
from .hotel import Hotel
from .services import PaymentDecider, RandomPaymentSimulator, FixedPaymentDecider

# Persistence
from .adapters import SnapshotAdapter, JsonSnapshotAdapter, SQLiteSnapshotAdapter, create_adapter
from .store import HotelStore

# Config management
from .base_config import HotelResConfig
from .config import get_config, set_config

__all__ = [
    # Version
    "__version__",

    # Exceptions
    "HotelResError",
    "ConfigurationError",
    "DatabaseError",
    "AdapterError",
    "ValidationError",
    "ReservationError",
    "FailureReason",
    "CommandError",

    # Core
    "Room",
    "RoomType",
    "Booking",
    "Hotel",
    "PaymentDecider",
    "RandomPaymentSimulator",
    "FixedPaymentDecider",

    # Persistence
    "SnapshotAdapter",
    "JsonSnapshotAdapter",
    "SQLiteSnapshotAdapter",
    "create_adapter",
    "HotelStore",

    # Config
    "HotelResConfig",
    "get_config",
    "set_config",
]
