from .payment_service import (
    PaymentDecider,
    RandomPaymentSimulator,
    FixedPaymentDecider,
)

__all__ = [
    "PaymentDecider",
    "RandomPaymentSimulator",
    "FixedPaymentDecider",
]
