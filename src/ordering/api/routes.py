"""FastAPI routes for the Ordering domain: the shared cart and orders."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddCartItemRequest,
    CartResponse,
    CreateOrderRequest,
    OrderResponse,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
)
from ordering.cart.store import get_cart_store
from ordering.order.order import Order
from ordering.order.placement import place_order
from ordering.order.status import UpdateOrderStatus

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart() -> CartResponse:
    return CartResponse.from_cart(get_cart_store().get())


@cart_router.post("/items", response_model=CartResponse)
async def add_cart_item(body: AddCartItemRequest) -> CartResponse:
    cart = get_cart_store().add(
        product_id=str(body.product_id),
        product_name=body.product_name,
        quantity=body.quantity,
        unit_price=body.unit_price,
    )
    return CartResponse.from_cart(cart)


@cart_router.put("/items/{item_id}", response_model=CartResponse)
async def update_cart_item(item_id: str, body: UpdateCartItemRequest) -> CartResponse:
    """Set an item's quantity. Zero or less removes the item."""
    cart = get_cart_store().update(product_id=item_id, quantity=body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.delete("/items/{item_id}", response_model=CartResponse)
async def remove_cart_item(item_id: str) -> CartResponse:
    cart = get_cart_store().remove(product_id=item_id)
    return CartResponse.from_cart(cart)


@cart_router.post("/reset", response_model=CartResponse)
async def reset_cart() -> CartResponse:
    """Restore the cart to its seed contents."""
    return CartResponse.from_cart(get_cart_store().reset())


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    """Place an order and reset the shared cart.

    1. Validate the submitted items
    2. Geocode the shipping city (best effort)
    3. Persist the order and reset the cart together
    """
    order = await place_order(
        customer_name=body.customer_name,
        shipping_address=body.shipping_address(),
        items=body.items_data(),
    )
    return OrderResponse.from_order(order)


@order_router.get("/{order_reference}", response_model=OrderResponse)
async def get_order(order_reference: str) -> OrderResponse:
    order = current_domain.repository_for(Order).find_by_reference(order_reference)
    return OrderResponse.from_order(order)


@order_router.patch("/{order_reference}/status", response_model=OrderResponse)
async def update_order_status(order_reference: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    current_domain.process(
        UpdateOrderStatus(order_reference=order_reference, status=body.status),
        asynchronous=False,
    )
    order = current_domain.repository_for(Order).find_by_reference(order_reference)
    return OrderResponse.from_order(order)
