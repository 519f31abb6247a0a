"""Order placement: command, handler and the checkout workflow.

``place_order`` is the entry point used by the API. It validates the
submitted items, resolves the shipping city off the event loop, and then,
holding the cart lock, persists the order and restores the cart to its seed
contents in a single unit of work.
"""

import asyncio
import json
from dataclasses import asdict

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.cart.store import get_cart_store
from ordering.domain import ordering
from ordering.geocoding import get_geocoder
from ordering.order.order import Order, validate_items
from ordering.utils.logging import get_logger
from shared.references import ORDER_PREFIX, generate_reference

logger = get_logger(__name__)

MAX_REFERENCE_ATTEMPTS = 5


class ReferenceGenerationError(Exception):
    """No unused order reference could be generated."""


@ordering.command(part_of="Order")
class PlaceOrder:
    cart_id = Identifier(required=True)
    customer_name = String(required=True, max_length=100)
    shipping_address = Text(required=True)  # JSON: address dict
    items = Text(required=True)  # JSON: list of item dicts
    location = Text()  # JSON: geocode dict, absent when unresolved


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        shipping_address = (
            json.loads(command.shipping_address)
            if isinstance(command.shipping_address, str)
            else command.shipping_address
        )
        location = json.loads(command.location) if command.location else None

        repo = current_domain.repository_for(Order)
        order = Order.place(
            order_reference=_unused_reference(repo),
            customer_name=command.customer_name,
            shipping_address=shipping_address,
            items_data=items_data,
            location=location,
        )
        repo.add(order)

        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.get(command.cart_id)
        cart.reset()
        cart_repo.add(cart)

        return order.order_reference


def _unused_reference(repo) -> str:
    for attempt in range(1, MAX_REFERENCE_ATTEMPTS + 1):
        reference = generate_reference(ORDER_PREFIX)
        if not repo.reference_exists(reference):
            return reference
        logger.warning("order_reference_collision", order_reference=reference, attempt=attempt)
    raise ReferenceGenerationError(f"Could not generate an unused order reference in {MAX_REFERENCE_ATTEMPTS} attempts")


def resolve_location(city: str, country: str) -> dict | None:
    """Geocode the shipping city. Never raises."""
    try:
        result = get_geocoder().resolve(city, country)
    except Exception:
        logger.warning("geocoding_failed", city=city, country=country, exc_info=True)
        return None
    return asdict(result) if result is not None else None


async def place_order(customer_name: str, shipping_address: dict, items: list[dict]) -> Order:
    """Place an order for the submitted items and reset the shared cart.

    Args:
        customer_name: Name of the customer.
        shipping_address: Dict with street_address, city, state, postal_code, country.
        items: List of dicts with product_name, quantity, unit_price, line_total.

    Returns:
        The persisted order, loaded back by its reference.

    Raises:
        ValidationError: When the items are empty or inconsistent, or the
            address fails the aggregate's checks. Nothing is persisted and
            the cart is left as it was.
    """
    validate_items(items)

    location = await asyncio.to_thread(
        resolve_location, shipping_address.get("city", ""), shipping_address.get("country", "")
    )

    store = get_cart_store()
    with store.lock:
        order_reference = current_domain.process(
            PlaceOrder(
                cart_id=store.cart_id,
                customer_name=customer_name,
                shipping_address=json.dumps(shipping_address),
                items=json.dumps(items),
                location=json.dumps(location) if location else None,
            ),
            asynchronous=False,
        )

    logger.info(
        "order_placed",
        order_reference=order_reference,
        item_count=len(items),
        geocoded=location is not None,
    )
    return current_domain.repository_for(Order).find_by_reference(order_reference)
