"""
Base configuration abstractions for hotelres.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from hotelres.adapters import SnapshotAdapter, create_adapter
from hotelres.services.payment_service import (
    DEFAULT_DELAY_SECONDS,
    DEFAULT_SUCCESS_RATE,
    PaymentDecider,
    RandomPaymentSimulator,
)


class HotelResConfig(ABC):
    """Abstract configuration contract for the reservation manager."""

    @abstractmethod
    def get_database_url(self) -> str:
        """Return the snapshot location, e.g. json:///hotel.json or sqlite:///hotel.db."""

    def get_payment_success_rate(self) -> float:
        """Probability that a simulated payment goes through. Default: 0.90"""
        return DEFAULT_SUCCESS_RATE

    def get_payment_delay_seconds(self) -> float:
        """Artificial payment latency. Default: 0.5"""
        return DEFAULT_DELAY_SECONDS

    def get_log_level(self) -> str:
        return "INFO"

    def create_adapter(self) -> SnapshotAdapter:
        """Build the snapshot adapter for the configured database URL."""
        return create_adapter(self.get_database_url())

    def create_payment_decider(self) -> PaymentDecider:
        return RandomPaymentSimulator(
            success_rate=self.get_payment_success_rate(),
            delay_seconds=self.get_payment_delay_seconds(),
        )
