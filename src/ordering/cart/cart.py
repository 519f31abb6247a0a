"""Shopping Cart aggregate (CQRS): the single shared cart of the storefront.

The cart is a standard CQRS aggregate (not event sourced). There is exactly
one cart per process: it is created with a fixed set of demo products, mutated
by add/update/remove, and restored to that seed set after every successful
order. Line totals are always derived from quantity and unit price.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from ordering.cart.events import CartItemAdded, CartItemRemoved, CartQuantityUpdated, CartReset
from ordering.domain import ordering
from shared import money

# Demo products every cart starts with
SEED_ITEMS = (
    {"product_id": "1", "product_name": "Wireless Mouse", "quantity": 2, "unit_price": 29.99},
    {"product_id": "2", "product_name": "Mechanical Keyboard", "quantity": 1, "unit_price": 129.99},
    {"product_id": "3", "product_name": "USB-C Hub", "quantity": 1, "unit_price": 49.99},
)


@ordering.entity(part_of="ShoppingCart")
class CartItem:
    product_id = String(required=True, max_length=100)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    line_total = Float(required=True, min_value=0.0)
    position = Integer(default=0)
    added_at = DateTime()

    def change_quantity(self, quantity):
        self.quantity = quantity
        self.line_total = money.line_total(quantity, self.unit_price)


@ordering.aggregate
class ShoppingCart:
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, seed=SEED_ITEMS):
        now = datetime.now(UTC)
        cart = cls(created_at=now, updated_at=now)
        for entry in seed:
            cart._append_item(**entry, added_at=now)
        return cart

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def ordered_items(self):
        """Items in the order they were first added."""
        return sorted(self.items, key=lambda item: item.position)

    @property
    def subtotal(self):
        return money.subtotal(item.line_total for item in self.items)

    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def _get_item(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise ObjectNotFoundError(f"Cart item `{product_id}` was not found")
        return item

    def _append_item(self, product_id, product_name, quantity, unit_price, added_at):
        next_position = max((i.position or 0 for i in self.items), default=0) + 1
        item = CartItem(
            product_id=str(product_id),
            product_name=product_name,
            quantity=quantity,
            unit_price=unit_price,
            line_total=money.line_total(quantity, unit_price),
            position=next_position,
            added_at=added_at,
        )
        self.add_items(item)
        return item

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, product_name, quantity, unit_price):
        """Add a product, or increase its quantity if it is already in the cart."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if unit_price < 0:
            raise ValidationError({"unit_price": ["Unit price cannot be negative"]})

        now = datetime.now(UTC)
        existing = self.find_item(product_id)
        if existing:
            existing.change_quantity(existing.quantity + quantity)
            item = existing
        else:
            item = self._append_item(product_id, product_name, quantity, unit_price, added_at=now)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product_id),
                quantity=quantity,
                new_quantity=item.quantity,
                line_total=item.line_total,
            )
        )

    def update_item_quantity(self, product_id, new_quantity):
        """Set the quantity of an item; zero or less removes it."""
        item = self._get_item(product_id)

        if new_quantity <= 0:
            self.remove_item(product_id)
            return

        previous_quantity = item.quantity
        item.change_quantity(new_quantity)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        """Remove an item from the cart."""
        item = self._get_item(product_id)

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=str(product_id),
            )
        )

    # -------------------------------------------------------------------
    # Cart lifecycle
    # -------------------------------------------------------------------
    def reset(self, seed=SEED_ITEMS):
        """Discard every change and restore the seed items."""
        for item in list(self.items):
            self.remove_items(item)

        now = datetime.now(UTC)
        for entry in seed:
            self._append_item(**entry, added_at=now)
        self.updated_at = now

        self.raise_(
            CartReset(
                cart_id=str(self.id),
                item_count=len(self.items),
                subtotal=self.subtotal,
            )
        )
