"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state. The server has one shared
cart, so cart contents observed by a user may have been changed by others
between requests; the journey re-reads the cart before checking out.
"""

from dataclasses import dataclass


@dataclass
class CheckoutState:
    """Tracks state for a single simulated checkout."""

    cart: dict | None = None
    order_reference: str | None = None
    order_subtotal: float | None = None
    transaction_id: str | None = None
    payment_succeeded: bool = False
