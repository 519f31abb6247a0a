"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's validation rules
(field lengths, postal-code pattern, card formats) and use the exact
camelCase keys expected by the Pydantic request schemas.
"""

import random

from faker import Faker

fake = Faker()

# Extra catalogue the load journey draws from; ids 1-3 are the seeded products.
PRODUCTS = [
    ("1", "Wireless Mouse", 29.99),
    ("2", "Mechanical Keyboard", 129.99),
    ("3", "USB-C Hub", 49.99),
    ("4", "Laptop Stand", 39.99),
    ("5", "Webcam HD", 59.99),
    ("6", "Noise Cancelling Headphones", 199.99),
    ("7", "Monitor Light Bar", 44.5),
]

# Cards for the simulated gateway: numbers starting with "4" are always declined.
APPROVED_CARDS = ["5555555555554444", "5105105105105100", "378282246310005", "6011111111111117"]
DECLINED_CARDS = ["4111111111111111", "4012888888881881"]


# ---------- Cart ----------


def cart_item_data() -> dict:
    """Generate an add-to-cart payload for a random product."""
    product_id, product_name, unit_price = random.choice(PRODUCTS)
    return {
        "productId": product_id,
        "productName": product_name,
        "quantity": random.randint(1, 3),
        "unitPrice": unit_price,
    }


def quantity_update_data() -> dict:
    """Generate a quantity update; occasionally zero, which removes the item."""
    return {"quantity": random.choice([0, 1, 2, 3, 5])}


# ---------- Orders ----------


def postal_code() -> str:
    """Generate a postal code matching ^[A-Za-z0-9\\s-]{5,10}$."""
    return random.choice([fake.zipcode(), fake.zipcode_plus4()])


def shipping_data() -> dict:
    """Generate the shipping half of a CreateOrderRequest."""
    return {
        "customerName": fake.name()[:100],
        "streetAddress": fake.street_address()[:200],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "postalCode": postal_code(),
        "country": "USA",
    }


def order_data(cart: dict) -> dict:
    """Generate a CreateOrderRequest from a cart response, as the browser client does."""
    return {
        **shipping_data(),
        "items": [
            {
                "productName": item["productName"],
                "quantity": item["quantity"],
                "unitPrice": item["unitPrice"],
                "lineTotal": item["lineTotal"],
            }
            for item in cart["items"]
        ],
    }


def status_update_data() -> dict:
    return {"status": random.choice(["processing", "shipped", "delivered"])}


# ---------- Payment ----------


def expiry() -> str:
    """Generate an MM/YY expiry a few years out."""
    return f"{random.randint(1, 12):02d}/{random.randint(27, 32)}"


def payment_data(declined_ratio: float = 0.2) -> dict:
    """Generate a ProcessPaymentRequest; a share of cards are ones the gateway declines."""
    cards = DECLINED_CARDS if random.random() < declined_ratio else APPROVED_CARDS
    card_number = random.choice(cards)
    return {
        "cardNumber": " ".join(card_number[i : i + 4] for i in range(0, len(card_number), 4)),
        "expiry": expiry(),
        "cvv": f"{random.randint(0, 9999):04d}" if card_number.startswith("3") else f"{random.randint(0, 999):03d}",
        "cardholderName": fake.name(),
    }
