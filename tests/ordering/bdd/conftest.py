"""Shared BDD fixtures and step definitions for the Ordering context."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers

from marketplace.ordering.cart.items import AddToCart


@pytest.fixture()
def products(add_product):
    """Lazily lists products by name, returning their ids."""
    listed = {}

    def _product(name):
        if name not in listed:
            listed[name] = add_product(name=name)
        return listed[name]

    return _product


@pytest.fixture()
def error():
    return {}


@given(parsers.cfparse('a buyer with {qty:d} of "{name}" in their cart'))
def buyer_with_cart(buyer_id, products, qty, name):
    current_domain.process(
        AddToCart(owner_id=buyer_id, product_id=products(name), quantity=qty),
        asynchronous=False,
    )


@given("a buyer with no cart")
def buyer_without_cart(buyer_id):
    pass
