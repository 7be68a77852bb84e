"""
Payment simulation.

There is no real gateway: a decider only answers whether a charge of a given
amount went through. The Hotel depends on the ``PaymentDecider`` protocol so
tests can plug in a fixed outcome.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Optional, Protocol, runtime_checkable

from hotelres.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_RATE = 0.90
DEFAULT_DELAY_SECONDS = 0.5


@runtime_checkable
class PaymentDecider(Protocol):
    def decide(self, amount: float) -> bool: ...


class RandomPaymentSimulator:
    """Blocks for a fixed delay, then succeeds with a fixed probability.

    Every call is an independent draw: no retries and no idempotency.
    """

    def __init__(
        self,
        success_rate: float = DEFAULT_SUCCESS_RATE,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= success_rate <= 1.0:
            raise ConfigurationError(f"Payment success rate must be between 0 and 1, got {success_rate}")
        if delay_seconds < 0:
            raise ConfigurationError(f"Payment delay cannot be negative, got {delay_seconds}")
        self.success_rate = success_rate
        self.delay_seconds = delay_seconds
        self._rng = rng or random.Random()

    def decide(self, amount: float) -> bool:
        logger.info(f"Simulating payment of {amount:.2f}...")
        if self.delay_seconds:
            time.sleep(self.delay_seconds)
        success = self._rng.random() < self.success_rate
        if success:
            logger.info("Payment succeeded.")
        else:
            logger.warning(f"Payment of {amount:.2f} failed.")
        return success


class FixedPaymentDecider:
    """Always returns the same outcome. Records every amount it was asked about."""

    def __init__(self, outcome: bool = True):
        self.outcome = outcome
        self.charged: list = []

    def decide(self, amount: float) -> bool:
        self.charged.append(amount)
        return self.outcome
