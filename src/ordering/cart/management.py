"""Cart management: commands and handler.

Handles creation of the seeded cart and restoring it to its seed contents.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class CreateCart:
    """Create a cart pre-filled with the demo products."""


@ordering.command(part_of="ShoppingCart")
class ResetCart:
    """Discard all changes to the cart and restore the demo products."""

    cart_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, _command):
        cart = ShoppingCart.create()
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)

    @handle(ResetCart)
    def reset_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.reset()
        repo.add(cart)
