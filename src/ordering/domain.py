"""Ordering bounded context: shared shopping cart and order placement.

Handles the single in-memory cart (CQRS aggregate), order persistence and
the checkout workflow that turns the cart's contents into an order.
"""

from protean.domain import Domain

from ordering.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
ordering = Domain(name="ordering")
