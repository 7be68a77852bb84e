from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from hotelres.adapters.base import SNAPSHOT_FORMAT, SNAPSHOT_VERSION, SnapshotAdapter
from hotelres.exceptions import DatabaseError, HotelResError
from hotelres.hotel import Hotel
from hotelres.models import Room, RoomType
from hotelres.services.payment_service import PaymentDecider

logger = logging.getLogger(__name__)


SAMPLE_ROOMS = (
    Room(101, RoomType.STANDARD, 2000.0),
    Room(102, RoomType.STANDARD, 2000.0),
    Room(201, RoomType.DELUXE, 3500.0),
    Room(202, RoomType.DELUXE, 3500.0),
    Room(301, RoomType.SUITE, 6000.0),
)


def seed_sample_data(hotel: Hotel) -> None:
    for room in SAMPLE_ROOMS:
        hotel.add_room(room)
    logger.info("Seeded sample rooms.")


def build_snapshot(hotel: Hotel) -> Dict[str, Any]:
    snapshot: Dict[str, Any] = {"format": SNAPSHOT_FORMAT, "version": SNAPSHOT_VERSION}
    snapshot.update(hotel.to_dict())
    return snapshot


def restore_snapshot(snapshot: Dict[str, Any], payment: Optional[PaymentDecider] = None) -> Hotel:
    if snapshot.get("format") != SNAPSHOT_FORMAT:
        raise DatabaseError(f"Unknown snapshot format: {snapshot.get('format')!r}")
    version = snapshot.get("version")
    if not isinstance(version, int) or version < 1 or version > SNAPSHOT_VERSION:
        raise DatabaseError(f"Unsupported snapshot version: {version!r}")
    try:
        return Hotel.from_dict(snapshot, payment=payment)
    except (TypeError, AttributeError) as e:
        raise DatabaseError(f"Malformed snapshot: {e}") from e


class HotelStore:
    """
    Saves and loads the whole hotel as one snapshot.

    Neither operation raises: load failures fall back to a freshly seeded
    hotel and save failures are logged and reported as False.
    """

    def __init__(self, adapter: SnapshotAdapter, payment: Optional[PaymentDecider] = None):
        self.adapter = adapter
        self.payment = payment

    def _create_seeded(self) -> Hotel:
        hotel = Hotel(payment=self.payment)
        seed_sample_data(hotel)
        self.save(hotel)
        return hotel

    def load_or_create(self) -> Hotel:
        if not self.adapter.exists():
            return self._create_seeded()

        try:
            hotel = restore_snapshot(self.adapter.read(), payment=self.payment)
        except HotelResError as e:
            logger.error(f"Failed to load database (will create new): {e}")
            return self._create_seeded()

        logger.info(f"Loaded hotel state from {self.adapter.describe()}")
        return hotel

    def save(self, hotel: Hotel) -> bool:
        try:
            self.adapter.write(build_snapshot(hotel))
        except HotelResError as e:
            logger.error(f"Failed to save database: {e}")
            return False
        logger.info(f"Saved hotel state to {self.adapter.describe()}")
        return True
