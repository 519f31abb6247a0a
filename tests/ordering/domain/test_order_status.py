"""Tests for overwriting an order's status."""

import pytest
from ordering.order.events import OrderStatusChanged
from ordering.order.order import Order
from protean.exceptions import ValidationError


@pytest.fixture()
def order():
    return Order.place(
        order_reference="ORD-1718035200000-STATUS001",
        customer_name="Jane Doe",
        shipping_address={
            "street_address": "1 Elm St",
            "city": "Portland",
            "state": "OR",
            "postal_code": "97201",
            "country": "USA",
        },
        items_data=[{"product_name": "USB-C Hub", "quantity": 1, "unit_price": 49.99, "line_total": 49.99}],
    )


class TestChangeStatus:
    def test_status_overwritten(self, order):
        order.change_status("shipped")
        assert order.status == "shipped"

    def test_any_free_text_accepted(self, order):
        order.change_status("waiting on customs paperwork")
        assert order.status == "waiting on customs paperwork"

    def test_no_transition_rules(self, order):
        order.change_status("delivered")
        order.change_status("pending")
        assert order.status == "pending"

    def test_raises_status_changed_event(self, order):
        order.change_status("shipped")
        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "pending"
        assert event.new_status == "shipped"
        assert event.order_reference == order.order_reference

    def test_blank_status_rejected(self, order):
        with pytest.raises(ValidationError):
            order.change_status("   ")
        assert order.status == "pending"

    def test_status_longer_than_50_rejected(self, order):
        with pytest.raises(ValidationError):
            order.change_status("x" * 51)
