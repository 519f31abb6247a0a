"""The process-wide cart store.

There is one shared cart per process, not one per customer. Every mutation
goes through ``CartStore`` so that reads-modify-writes of the cart are
serialized behind a single lock; order placement takes the same lock around
persisting the order and resetting the cart.

Use ``get_cart_store()`` to obtain the singleton and ``reset_cart_store()``
to forget it (useful for tests).
"""

import threading

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from ordering.cart.management import CreateCart, ResetCart
from ordering.utils.logging import get_logger

logger = get_logger(__name__)


class CartStore:
    """Single-writer access to the shared shopping cart."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._cart_id: str | None = None

    @property
    def cart_id(self) -> str:
        """Identity of the shared cart, creating the seeded cart on first use."""
        with self.lock:
            return str(self._load().id)

    def _load(self) -> ShoppingCart:
        repo = current_domain.repository_for(ShoppingCart)
        if self._cart_id is not None:
            try:
                return repo.get(self._cart_id)
            except ObjectNotFoundError:
                logger.warning("cart_missing_recreating", cart_id=self._cart_id)

        self._cart_id = current_domain.process(CreateCart(), asynchronous=False)
        logger.info("cart_created", cart_id=self._cart_id)
        return repo.get(self._cart_id)

    def get(self) -> ShoppingCart:
        with self.lock:
            return self._load()

    def add(self, product_id, product_name, quantity, unit_price) -> ShoppingCart:
        with self.lock:
            cart_id = str(self._load().id)
            current_domain.process(
                AddToCart(
                    cart_id=cart_id,
                    product_id=str(product_id),
                    product_name=product_name,
                    quantity=quantity,
                    unit_price=unit_price,
                ),
                asynchronous=False,
            )
            return self._load()

    def update(self, product_id, quantity) -> ShoppingCart:
        with self.lock:
            cart_id = str(self._load().id)
            current_domain.process(
                UpdateCartQuantity(cart_id=cart_id, product_id=str(product_id), new_quantity=quantity),
                asynchronous=False,
            )
            return self._load()

    def remove(self, product_id) -> ShoppingCart:
        with self.lock:
            cart_id = str(self._load().id)
            current_domain.process(
                RemoveFromCart(cart_id=cart_id, product_id=str(product_id)),
                asynchronous=False,
            )
            return self._load()

    def reset(self) -> ShoppingCart:
        with self.lock:
            cart_id = str(self._load().id)
            current_domain.process(ResetCart(cart_id=cart_id), asynchronous=False)
            return self._load()


_current_store: CartStore | None = None


def get_cart_store() -> CartStore:
    """Return the process-wide cart store."""
    global _current_store
    if _current_store is None:
        _current_store = CartStore()
    return _current_store


def reset_cart_store() -> None:
    """Forget the current cart store."""
    global _current_store
    _current_store = None
