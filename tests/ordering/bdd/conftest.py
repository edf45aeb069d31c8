"""Shared BDD fixtures and step definitions for orders and their totals."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from storefront.ordering.order import Order


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def catalogue():
    """Product identifiers by SKU."""
    return {}


def _money(text):
    return float(text)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered customer", target_fixture="customer_id")
def registered_customer(register_customer):
    return register_customer()


@given(parsers.cfparse('a product "{sku}" priced at {price}'))
def product_priced(create_product, catalogue, sku, price):
    catalogue[sku] = create_product(sku=sku, price=_money(price))


@given(
    parsers.cfparse("the customer has an order with subtotal {subtotal}, shipping {shipping} and tax {tax}"),
    target_fixture="order_id",
)
def existing_order(place_order, customer_id, subtotal, shipping, tax):
    return place_order(customer_id, subtotal=_money(subtotal), shipping=_money(shipping), tax=_money(tax))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order total is {total}"))
def order_total_is(order_id, total):
    assert current_domain.repository_for(Order).get(order_id).total == _money(total)


@then("the order is saved")
def order_is_saved(order_id):
    assert current_domain.repository_for(Order).get(order_id) is not None


@then(parsers.cfparse("the change is rejected with {error_name}"))
def change_rejected(error, error_name):
    assert error["exc"] is not None, "Expected an error but none was raised"
    assert isinstance(error["exc"], ValidationError)
    assert type(error["exc"]).__name__ == error_name
