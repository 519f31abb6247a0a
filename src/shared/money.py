"""Monetary rounding shared by the cart, orders and payments.

Amounts are plain floats rounded to cents with half-up semantics, matching
what the browser client computes with ``Math.round(x * 100) / 100``.
Python's built-in ``round()`` uses banker's rounding and must not be used
for amounts shown to customers.
"""

import math


def round_cents(amount: float) -> float:
    """Round a non-negative amount to two decimals, ties going up."""
    return math.floor(amount * 100 + 0.5) / 100


def line_total(quantity: int, unit_price: float) -> float:
    """Total for one line: quantity x unit price, rounded to cents."""
    return round_cents(quantity * unit_price)


def subtotal(line_totals) -> float:
    """Sum of line totals, rounded to cents."""
    return round_cents(sum(line_totals))
