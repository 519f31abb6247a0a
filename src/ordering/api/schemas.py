"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) with camelCase JSON
keys, separate from internal Protean commands. Text lengths and formats are
checked here; the domain re-checks the item arithmetic.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ordering.cart.cart import ShoppingCart
from ordering.order.order import Order

POSTAL_CODE_REGEX = r"^[A-Za-z0-9\s-]{5,10}$"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddCartItemRequest(CamelModel):
    product_id: str | int
    product_name: str = Field(min_length=1, max_length=255)
    quantity: int = Field(ge=1)
    unit_price: float = Field(ge=0)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "productId": "4",
                    "productName": "Laptop Stand",
                    "quantity": 1,
                    "unitPrice": 39.99,
                }
            ]
        },
    )


class UpdateCartItemRequest(CamelModel):
    """A quantity of zero or less removes the item."""

    quantity: int


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class OrderItemRequest(CamelModel):
    product_name: str = Field(min_length=1, max_length=255)
    quantity: int
    unit_price: float
    line_total: float


class CreateOrderRequest(CamelModel):
    customer_name: str = Field(min_length=1, max_length=100)
    street_address: str = Field(min_length=1, max_length=200)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=50)
    postal_code: str = Field(max_length=20, pattern=POSTAL_CODE_REGEX)
    country: str = Field(min_length=1, max_length=100)
    items: list[OrderItemRequest]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "customerName": "Jane Doe",
                    "streetAddress": "123 Main St",
                    "city": "Springfield",
                    "state": "IL",
                    "postalCode": "62701",
                    "country": "USA",
                    "items": [
                        {
                            "productName": "Wireless Mouse",
                            "quantity": 2,
                            "unitPrice": 29.99,
                            "lineTotal": 59.98,
                        }
                    ],
                }
            ]
        },
    )

    def shipping_address(self) -> dict:
        return {
            "street_address": self.street_address,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
        }

    def items_data(self) -> list[dict]:
        return [item.model_dump() for item in self.items]


class UpdateOrderStatusRequest(CamelModel):
    status: str = Field(min_length=1, max_length=50)

    @field_validator("status")
    @classmethod
    def status_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Status is required")
        return value


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartItemResponse(CamelModel):
    id: str
    product_name: str
    quantity: int
    unit_price: float
    line_total: float


class CartResponse(CamelModel):
    items: list[CartItemResponse]
    subtotal: float

    @classmethod
    def from_cart(cls, cart: ShoppingCart) -> "CartResponse":
        return cls(
            items=[
                CartItemResponse(
                    id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for item in cart.ordered_items
            ],
            subtotal=cart.subtotal,
        )


class OrderItemResponse(CamelModel):
    id: str
    order_reference: str
    product_name: str
    quantity: int
    unit_price: float
    line_total: float


class OrderResponse(CamelModel):
    id: str
    order_reference: str
    customer_name: str
    street_address: str
    city: str
    state: str
    postal_code: str
    country: str
    latitude: float | None = None
    longitude: float | None = None
    formatted_address: str | None = None
    subtotal: float
    status: str
    created_at: datetime | None = None
    items: list[OrderItemResponse]

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        address = order.shipping_address
        location = order.location
        return cls(
            id=str(order.id),
            order_reference=order.order_reference,
            customer_name=order.customer_name,
            street_address=address.street_address,
            city=address.city,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
            latitude=location.latitude if location else None,
            longitude=location.longitude if location else None,
            formatted_address=location.formatted_address if location else None,
            subtotal=order.subtotal,
            status=order.status,
            created_at=order.created_at,
            items=[
                OrderItemResponse(
                    id=str(item.id),
                    order_reference=item.order_reference,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for item in order.ordered_items
            ],
        )
