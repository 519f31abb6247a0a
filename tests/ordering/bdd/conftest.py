"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.cart.store import get_cart_store
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def store():
    return get_cart_store()


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the seeded cart")
def seeded_cart(store):
    store.reset()


@given(parsers.cfparse('product "{product_id}" has been removed from the cart'))
def product_removed(store, product_id):
    store.remove(product_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} items"))
def cart_has_n_items(store, count):
    assert len(store.get().items) == count


@then(parsers.cfparse("the cart subtotal is {subtotal:f}"))
def cart_subtotal_is(store, subtotal):
    assert store.get().subtotal == pytest.approx(subtotal)
