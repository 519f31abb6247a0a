"""Simulated payment gateway.

No external calls and no money moves. Each attempt blocks for a
configurable latency and then:

1. declines any card whose number starts with ``"4"``;
2. otherwise fails at random with probability ``failure_rate``;
3. otherwise succeeds with a fresh ``TXN-`` transaction reference.

Nothing is persisted. ``calls`` keeps an in-memory audit trail of the most
recent attempts that holds only the last four card digits.
"""

import random
import time
from collections import deque

from payments.gateway.port import PaymentGateway, PaymentResult, normalize_card_number
from payments.utils.logging import logger
from shared.references import TRANSACTION_PREFIX, generate_reference

DECLINED_MESSAGE = "Payment declined. Please check your card details or try a different payment method."
FAILED_MESSAGE = "Payment processing failed. Please try again."
SUCCESS_MESSAGE = "Payment processed successfully"

DECLINED_CARD_PREFIX = "4"

AUDIT_TRAIL_SIZE = 1000


class SimulatedGateway(PaymentGateway):
    """Configurable simulated payment gateway."""

    def __init__(
        self,
        latency_seconds: float = 1.0,
        failure_rate: float = 0.1,
        rng: random.Random | None = None,
        audit_trail_size: int = AUDIT_TRAIL_SIZE,
    ) -> None:
        self.latency_seconds = latency_seconds
        self.failure_rate = failure_rate
        self.rng = rng or random.Random()
        self.calls: deque[dict] = deque(maxlen=audit_trail_size)

    def configure(self, latency_seconds: float | None = None, failure_rate: float | None = None) -> None:
        """Adjust gateway behavior at runtime. ``None`` leaves a setting unchanged."""
        if latency_seconds is not None:
            if latency_seconds < 0:
                raise ValueError("latency_seconds cannot be negative")
            self.latency_seconds = latency_seconds
        if failure_rate is not None:
            if not 0.0 <= failure_rate <= 1.0:
                raise ValueError("failure_rate must be between 0 and 1")
            self.failure_rate = failure_rate

    def process(
        self,
        card_number: str,
        expiry: str,
        cvv: str,  # noqa: ARG002
        cardholder_name: str,
    ) -> PaymentResult:
        digits = normalize_card_number(card_number)

        if self.latency_seconds > 0:
            time.sleep(self.latency_seconds)

        if digits.startswith(DECLINED_CARD_PREFIX):
            result = PaymentResult(success=False, message=DECLINED_MESSAGE)
        elif self.rng.random() < self.failure_rate:
            result = PaymentResult(success=False, message=FAILED_MESSAGE)
        else:
            result = PaymentResult(
                success=True,
                message=SUCCESS_MESSAGE,
                transaction_id=generate_reference(TRANSACTION_PREFIX),
            )

        self.calls.append(
            {
                "method": "process",
                "last4": digits[-4:],
                "expiry": expiry,
                "cardholder_name": cardholder_name,
                "success": result.success,
                "transaction_id": result.transaction_id,
            }
        )
        logger.info(
            "payment_processed",
            last4=digits[-4:],
            success=result.success,
            transaction_id=result.transaction_id,
        )
        return result
