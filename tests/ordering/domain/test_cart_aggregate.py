"""Tests for ShoppingCart aggregate creation and queries."""

from ordering.cart.cart import SEED_ITEMS, ShoppingCart


class TestCartCreation:
    def test_create_seeds_demo_products(self):
        cart = ShoppingCart.create()
        assert [item.product_id for item in cart.ordered_items] == ["1", "2", "3"]

    def test_seed_contents(self):
        cart = ShoppingCart.create()
        mouse, keyboard, hub = cart.ordered_items
        assert (mouse.product_name, mouse.quantity, mouse.unit_price) == ("Wireless Mouse", 2, 29.99)
        assert (keyboard.product_name, keyboard.quantity, keyboard.unit_price) == ("Mechanical Keyboard", 1, 129.99)
        assert (hub.product_name, hub.quantity, hub.unit_price) == ("USB-C Hub", 1, 49.99)

    def test_seed_subtotal(self):
        assert ShoppingCart.create().subtotal == 239.96

    def test_seed_line_totals_are_derived(self):
        cart = ShoppingCart.create()
        assert [item.line_total for item in cart.ordered_items] == [59.98, 129.99, 49.99]

    def test_create_with_empty_seed(self):
        cart = ShoppingCart.create(seed=())
        assert len(cart.items) == 0
        assert cart.subtotal == 0.0

    def test_create_sets_timestamps(self):
        cart = ShoppingCart.create()
        assert cart.created_at is not None
        assert cart.updated_at is not None

    def test_create_generates_id(self):
        assert ShoppingCart.create().id is not None

    def test_seed_is_not_shared_between_carts(self):
        first = ShoppingCart.create()
        second = ShoppingCart.create()
        first.update_item_quantity("1", 7)
        assert second.find_item("1").quantity == SEED_ITEMS[0]["quantity"]


class TestCartQueries:
    def test_find_item_by_product_id(self):
        cart = ShoppingCart.create()
        assert cart.find_item("2").product_name == "Mechanical Keyboard"

    def test_find_item_accepts_non_string_id(self):
        cart = ShoppingCart.create()
        assert cart.find_item(3).product_name == "USB-C Hub"

    def test_find_missing_item_returns_none(self):
        assert ShoppingCart.create().find_item("99") is None

    def test_ordered_items_keep_insertion_order(self):
        cart = ShoppingCart.create(seed=())
        cart.add_item("b", "Second", 1, 1.0)
        cart.add_item("a", "First", 1, 1.0)
        assert [item.product_id for item in cart.ordered_items] == ["b", "a"]
