"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations. The
adapter is chosen by ``PAYMENT_GATEWAY`` (only ``simulated`` exists) and
tuned by ``PAYMENT_LATENCY_SECONDS`` and ``PAYMENT_FAILURE_RATE``.
"""

import os

from payments.gateway.port import PaymentGateway
from payments.gateway.simulated_adapter import SimulatedGateway

_current_gateway: PaymentGateway | None = None


def _build_gateway() -> PaymentGateway:
    adapter = os.environ.get("PAYMENT_GATEWAY", "simulated").lower()
    if adapter != "simulated":
        raise ValueError(f"Unknown PAYMENT_GATEWAY: {adapter}")
    return SimulatedGateway(
        latency_seconds=float(os.environ.get("PAYMENT_LATENCY_SECONDS", "1.0")),
        failure_rate=float(os.environ.get("PAYMENT_FAILURE_RATE", "0.1")),
    )


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway, building it from the environment on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = _build_gateway()
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the gateway configured by the environment."""
    global _current_gateway
    _current_gateway = None
