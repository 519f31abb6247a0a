"""Tests for placing orders and the Order aggregate's structure."""

import pytest
from ordering.order.events import OrderPlaced
from ordering.order.order import GeoLocation, Order, ShippingAddress
from protean.exceptions import ValidationError

ADDRESS = {
    "street_address": "123 Main St",
    "city": "Springfield",
    "state": "IL",
    "postal_code": "62701",
    "country": "USA",
}

ITEMS = [
    {"product_name": "Wireless Mouse", "quantity": 2, "unit_price": 29.99, "line_total": 59.98},
    {"product_name": "Mechanical Keyboard", "quantity": 1, "unit_price": 129.99, "line_total": 129.99},
]


def _place(**overrides):
    defaults = {
        "order_reference": "ORD-1718035200000-ABCDEFGHI",
        "customer_name": "Jane Doe",
        "shipping_address": ADDRESS,
        "items_data": ITEMS,
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestPlaceOrder:
    def test_initial_status_is_pending(self):
        assert _place().status == "pending"

    def test_subtotal_is_sum_of_line_totals(self):
        assert _place().subtotal == 189.97

    def test_items_keep_submitted_order(self):
        order = _place()
        assert [item.product_name for item in order.ordered_items] == ["Wireless Mouse", "Mechanical Keyboard"]

    def test_items_carry_order_reference(self):
        order = _place()
        assert all(item.order_reference == order.order_reference for item in order.items)

    def test_shipping_address_value_object(self):
        address = _place().shipping_address
        assert isinstance(address, ShippingAddress)
        assert address.city == "Springfield"
        assert address.postal_code == "62701"

    def test_location_absent_by_default(self):
        assert _place().location is None

    def test_location_recorded(self):
        order = _place(location={"latitude": 39.78, "longitude": -89.65, "formatted_address": "Springfield, IL, USA"})
        assert isinstance(order.location, GeoLocation)
        assert order.location.latitude == 39.78
        assert order.location.formatted_address == "Springfield, IL, USA"

    def test_timestamps_set(self):
        order = _place()
        assert order.created_at is not None
        assert order.updated_at == order.created_at

    def test_raises_order_placed(self):
        order = _place()
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.order_reference == order.order_reference
        assert event.item_count == 2
        assert event.subtotal == 189.97
        assert event.geocoded is False

    def test_order_placed_marks_geocoded(self):
        order = _place(location={"latitude": 1.0, "longitude": 2.0, "formatted_address": "Somewhere"})
        assert order._events[-1].geocoded is True


class TestShippingAddressValidation:
    def test_short_postal_code_rejected(self):
        with pytest.raises(ValidationError) as exc:
            ShippingAddress(**{**ADDRESS, "postal_code": "AB"})
        assert "postal_code" in exc.value.messages

    def test_postal_code_with_symbols_rejected(self):
        with pytest.raises(ValidationError):
            ShippingAddress(**{**ADDRESS, "postal_code": "12#45"})

    def test_postal_code_with_space_and_dash_accepted(self):
        address = ShippingAddress(**{**ADDRESS, "postal_code": "SW1A 1AA"})
        assert address.postal_code == "SW1A 1AA"
        assert ShippingAddress(**{**ADDRESS, "postal_code": "12345-6789"}).postal_code == "12345-6789"

    def test_street_too_long_rejected(self):
        with pytest.raises(ValidationError):
            ShippingAddress(**{**ADDRESS, "street_address": "x" * 201})

    def test_state_too_long_rejected(self):
        with pytest.raises(ValidationError):
            ShippingAddress(**{**ADDRESS, "state": "x" * 51})

    def test_customer_name_too_long_rejected(self):
        with pytest.raises(ValidationError):
            _place(customer_name="x" * 101)

    def test_invalid_address_rejects_order(self):
        with pytest.raises(ValidationError):
            _place(shipping_address={**ADDRESS, "postal_code": "AB"})


class TestItemValidation:
    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _place(items_data=[])
        assert "items" in exc.value.messages

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _place(items_data=[{"product_name": "X", "quantity": 0, "unit_price": 1.0, "line_total": 0.0}])

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _place(items_data=[{"product_name": "X", "quantity": 1, "unit_price": -1.0, "line_total": 0.0}])

    def test_negative_line_total_rejected(self):
        with pytest.raises(ValidationError):
            _place(items_data=[{"product_name": "X", "quantity": 1, "unit_price": 0.0, "line_total": -0.01}])

    def test_inconsistent_line_total_rejected(self):
        with pytest.raises(ValidationError):
            _place(items_data=[{"product_name": "X", "quantity": 2, "unit_price": 10.0, "line_total": 5.0}])

    def test_half_cent_rounding_difference_accepted(self):
        order = _place(items_data=[{"product_name": "X", "quantity": 3, "unit_price": 0.335, "line_total": 1.01}])
        assert order.subtotal == 1.01

    def test_free_item_accepted(self):
        order = _place(items_data=[{"product_name": "Sticker", "quantity": 1, "unit_price": 0.0, "line_total": 0.0}])
        assert order.subtotal == 0.0
