"""Checkout load test scenarios.

Stateful SequentialTaskSet journeys that drive the API in the same order
as the browser client: cart, shipping, payment, confirmation.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    cart_item_data,
    order_data,
    payment_data,
    quantity_update_data,
    status_update_data,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CheckoutState


class CheckoutJourney(SequentialTaskSet):
    """View Cart -> Add Item -> Update Quantity -> Place Order -> Pay -> Confirm.

    The happy path of the four-screen client. Every placed order resets the
    shared cart, so concurrent users see each other's changes.
    """

    def on_start(self):
        self.state = CheckoutState()

    @task
    def view_cart(self):
        with self.client.get("/cart", catch_response=True, name="GET /cart") as resp:
            if resp.status_code == 200:
                self.state.cart = resp.json()
            else:
                resp.failure(f"View cart failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_item(self):
        payload = cart_item_data()
        with self.client.post("/cart/items", json=payload, catch_response=True, name="POST /cart/items") as resp:
            if resp.status_code == 200:
                self.state.cart = resp.json()
            else:
                resp.failure(f"Add cart item failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def update_quantity(self):
        if not self.state.cart or not self.state.cart["items"]:
            return
        item_id = random.choice(self.state.cart["items"])["id"]
        with self.client.put(
            f"/cart/items/{item_id}",
            json=quantity_update_data(),
            catch_response=True,
            name="PUT /cart/items/{id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart = resp.json()
            elif resp.status_code == 404:
                # Another user's order reset the cart under us
                resp.success()
            else:
                resp.failure(f"Update quantity failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def place_order(self):
        with self.client.get("/cart", catch_response=True, name="GET /cart") as resp:
            if resp.status_code != 200:
                resp.failure(f"Reload cart failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.state.cart = resp.json()

        if not self.state.cart["items"]:
            self.interrupt()
            return

        with self.client.post(
            "/orders",
            json=order_data(self.state.cart),
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                order = resp.json()
                self.state.order_reference = order["orderReference"]
                self.state.order_subtotal = order["subtotal"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def pay(self):
        with self.client.post(
            "/payment/process",
            json=payment_data(),
            catch_response=True,
            name="POST /payment/process",
        ) as resp:
            if resp.status_code == 200:
                result = resp.json()
                self.state.payment_succeeded = result["success"]
                self.state.transaction_id = result.get("transactionId")
            else:
                resp.failure(f"Payment failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def confirm(self):
        with self.client.get(
            f"/orders/{self.state.order_reference}",
            catch_response=True,
            name="GET /orders/{reference}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Fetch order failed: {resp.status_code}: {extract_error_detail(resp)}")
            elif resp.json()["subtotal"] != self.state.order_subtotal:
                resp.failure("Order subtotal changed after placement")

    @task
    def done(self):
        self.interrupt()


class OrderAdminJourney(SequentialTaskSet):
    """Place Order -> Update Status -> Fetch.

    Exercises status overwrites and lookups by reference.
    """

    def on_start(self):
        self.state = CheckoutState()

    @task
    def place_order(self):
        cart = self.client.get("/cart", name="GET /cart").json()
        if not cart["items"]:
            self.interrupt()
            return
        with self.client.post("/orders", json=order_data(cart), catch_response=True, name="POST /orders") as resp:
            if resp.status_code == 201:
                self.state.order_reference = resp.json()["orderReference"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def update_status(self):
        with self.client.patch(
            f"/orders/{self.state.order_reference}/status",
            json=status_update_data(),
            catch_response=True,
            name="PATCH /orders/{reference}/status",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update status failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def fetch(self):
        self.client.get(f"/orders/{self.state.order_reference}", name="GET /orders/{reference}")

    @task
    def done(self):
        self.interrupt()


class CheckoutUser(HttpUser):
    """Shoppers walking through checkout."""

    wait_time = between(1, 3)
    tasks = {CheckoutJourney: 4, OrderAdminJourney: 1}


class CartBrowsingUser(HttpUser):
    """Shoppers who only look at and fiddle with the cart."""

    wait_time = between(0.5, 2)

    @task(5)
    def view_cart(self):
        self.client.get("/cart", name="GET /cart")

    @task(2)
    def add_item(self):
        self.client.post("/cart/items", json=cart_item_data(), name="POST /cart/items")

    @task(1)
    def remove_item(self):
        cart = self.client.get("/cart", name="GET /cart").json()
        if not cart["items"]:
            return
        item_id = random.choice(cart["items"])["id"]
        with self.client.delete(f"/cart/items/{item_id}", catch_response=True, name="DELETE /cart/items/{id}") as resp:
            if resp.status_code == 404:
                resp.success()
