"""Domain events for the Order aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A customer placed an order at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_reference = String(required=True, max_length=50)
    customer_name = String(required=True, max_length=100)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    geocoded = Boolean(default=False)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """An order's status was overwritten."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_reference = String(required=True, max_length=50)
    previous_status = String(required=True, max_length=50)
    new_status = String(required=True, max_length=50)
    changed_at = DateTime(required=True)
