"""Order aggregate (CQRS): an order placed from the shared cart.

An order is written once at checkout together with its line items and is
afterwards only touched to overwrite its status. The status is free text:
no transition rules are enforced, any non-empty value is accepted.
"""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, ValueObject

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged
from shared import money

INITIAL_STATUS = "pending"

POSTAL_CODE_PATTERN = re.compile(r"^[A-Za-z0-9\s-]{5,10}$")

# Submitted line totals may differ from quantity x unit price by rounding only
LINE_TOTAL_TOLERANCE = 0.005


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships to, captured verbatim at checkout."""

    street_address = String(required=True, max_length=200)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=50)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)

    @invariant.post
    def postal_code_must_be_valid_format(self):
        if self.postal_code is None:
            return

        if not POSTAL_CODE_PATTERN.match(self.postal_code):
            raise ValidationError(
                {"postal_code": ["Postal code must be alphanumeric and between 5-10 characters"]}
            )


@ordering.value_object(part_of="Order")
class GeoLocation:
    """Best-effort coordinates for the shipping city."""

    latitude = Float(min_value=-90.0, max_value=90.0)
    longitude = Float(min_value=-180.0, max_value=180.0)
    formatted_address = String(max_length=255)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    order_reference = String(required=True, max_length=50)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    line_total = Float(required=True, min_value=0.0)
    position = Integer(default=0)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    order_reference = String(required=True, max_length=50, unique=True)
    customer_name = String(required=True, max_length=100)
    shipping_address = ValueObject(ShippingAddress, required=True)
    location = ValueObject(GeoLocation)
    subtotal = Float(required=True, min_value=0.0)
    status = String(required=True, max_length=50, default=INITIAL_STATUS)
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, order_reference, customer_name, shipping_address, items_data, location=None):
        """Create a pending order from checkout data.

        Args:
            order_reference: Unique ``ORD-...`` reference for the order.
            customer_name: Name of the customer placing the order.
            shipping_address: Dict with street_address, city, state,
                              postal_code, country.
            items_data: List of dicts with product_name, quantity,
                        unit_price, line_total.
            location: Optional dict with latitude, longitude, formatted_address.
        """
        validate_items(items_data)

        now = datetime.now(UTC)
        order = cls(
            order_reference=order_reference,
            customer_name=customer_name,
            shipping_address=ShippingAddress(**shipping_address),
            location=GeoLocation(**location) if location else None,
            subtotal=money.subtotal(item["line_total"] for item in items_data),
            status=INITIAL_STATUS,
            created_at=now,
            updated_at=now,
        )

        for position, item in enumerate(items_data, start=1):
            order.add_items(
                OrderItem(
                    order_reference=order_reference,
                    product_name=item["product_name"],
                    quantity=item["quantity"],
                    unit_price=item["unit_price"],
                    line_total=item["line_total"],
                    position=position,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_reference=order_reference,
                customer_name=customer_name,
                item_count=len(items_data),
                subtotal=order.subtotal,
                geocoded=location is not None,
                placed_at=now,
            )
        )
        return order

    @property
    def ordered_items(self):
        return sorted(self.items, key=lambda item: item.position)

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        """Overwrite the status. Any non-empty value is accepted."""
        if not new_status or not new_status.strip():
            raise ValidationError({"status": ["Status cannot be empty"]})

        previous_status = self.status
        now = datetime.now(UTC)
        self.status = new_status
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                order_reference=self.order_reference,
                previous_status=previous_status,
                new_status=new_status,
                changed_at=now,
            )
        )


def validate_items(items_data):
    """Check the invariants order placement depends on.

    Field lengths and formats are checked at the API boundary; this only
    re-checks what the subtotal arithmetic relies on.
    """
    if not items_data:
        raise ValidationError({"items": ["An order must contain at least one item"]})

    for index, item in enumerate(items_data):
        if item.get("quantity") is None or item["quantity"] < 1:
            raise ValidationError({"items": [f"Item {index}: quantity must be at least 1"]})
        if item.get("unit_price") is None or item["unit_price"] < 0:
            raise ValidationError({"items": [f"Item {index}: unit price cannot be negative"]})
        if item.get("line_total") is None or item["line_total"] < 0:
            raise ValidationError({"items": [f"Item {index}: line total cannot be negative"]})

        expected = item["quantity"] * item["unit_price"]
        if abs(item["line_total"] - expected) > LINE_TOTAL_TOLERANCE + 1e-9:
            raise ValidationError(
                {"items": [f"Item {index}: line total {item['line_total']} does not match quantity x unit price"]}
            )


@ordering.repository(part_of=Order)
class OrderRepository:
    """Order lookups by the customer-facing reference."""

    def find_by_reference(self, order_reference: str) -> Order:
        results = self._dao.query.filter(order_reference=order_reference).all()
        if not results.items:
            raise ObjectNotFoundError(f"Order with reference `{order_reference}` was not found")
        return self.get(results.items[0].id)

    def reference_exists(self, order_reference: str) -> bool:
        return bool(self._dao.query.filter(order_reference=order_reference).all().items)
