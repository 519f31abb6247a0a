"""Tests for events raised by the ShoppingCart aggregate."""

from ordering.cart.cart import ShoppingCart
from ordering.cart.events import CartItemAdded, CartItemRemoved, CartQuantityUpdated, CartReset


def _last_event(cart):
    return cart._events[-1]


class TestCartItemAddedEvent:
    def test_raised_for_new_item(self):
        cart = ShoppingCart.create()
        cart.add_item("4", "Laptop Stand", 2, 39.99)

        event = _last_event(cart)
        assert isinstance(event, CartItemAdded)
        assert event.cart_id == str(cart.id)
        assert event.product_id == "4"
        assert event.quantity == 2
        assert event.new_quantity == 2
        assert event.line_total == 79.98

    def test_raised_for_merged_item(self):
        cart = ShoppingCart.create()
        cart.add_item("1", "Wireless Mouse", 1, 29.99)

        event = _last_event(cart)
        assert event.quantity == 1
        assert event.new_quantity == 3


class TestCartQuantityUpdatedEvent:
    def test_raised_on_update(self):
        cart = ShoppingCart.create()
        cart.update_item_quantity("2", 4)

        event = _last_event(cart)
        assert isinstance(event, CartQuantityUpdated)
        assert event.previous_quantity == 1
        assert event.new_quantity == 4

    def test_zero_quantity_raises_removed_instead(self):
        cart = ShoppingCart.create()
        cart.update_item_quantity("2", 0)

        assert isinstance(_last_event(cart), CartItemRemoved)
        assert not any(isinstance(e, CartQuantityUpdated) for e in cart._events)


class TestCartItemRemovedEvent:
    def test_raised_on_remove(self):
        cart = ShoppingCart.create()
        cart.remove_item("3")

        event = _last_event(cart)
        assert isinstance(event, CartItemRemoved)
        assert event.product_id == "3"


class TestCartResetEvent:
    def test_raised_on_reset(self):
        cart = ShoppingCart.create()
        cart.remove_item("1")
        cart.reset()

        event = _last_event(cart)
        assert isinstance(event, CartReset)
        assert event.item_count == 3
        assert event.subtotal == 239.96
