"""Payment gateway port (abstract interface).

Defines the contract that payment gateway adapters implement, so the
simulated gateway can be swapped for another adapter without touching the
API layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentResult:
    """Result of a payment attempt."""

    success: bool
    message: str | None = None
    transaction_id: str | None = None


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def process(
        self,
        card_number: str,
        expiry: str,
        cvv: str,
        cardholder_name: str,
    ) -> PaymentResult:
        """Attempt a payment with the given card details."""
        ...


def normalize_card_number(card_number: str) -> str:
    """Strip all whitespace from a card number."""
    return "".join(card_number.split())
