"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the cart, or its quantity was increased."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = String(required=True, max_length=100)
    quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    line_total = Float(required=True)


@ordering.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    """The quantity of a cart item was changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = String(required=True, max_length=100)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="ShoppingCart")
class CartItemRemoved:
    """An item was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = String(required=True, max_length=100)


@ordering.event(part_of="ShoppingCart")
class CartReset:
    """The cart was restored to its seed contents."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
