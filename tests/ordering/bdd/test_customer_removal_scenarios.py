"""BDD tests for customer and address removal."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from pytest_bdd import given, scenarios, then, when
from storefront.identity.addresses import RemoveAddress
from storefront.identity.customer import Customer
from storefront.identity.customers import DeleteCustomer
from storefront.ordering.cart import Cart
from storefront.ordering.carts import CreateCart
from storefront.ordering.order import Order
from storefront.reviews.review import Review
from storefront.reviews.submission import SubmitReview
from storefront.shared.queries import find_all

scenarios("features/customer_removal.feature")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the customer has an address, a cart and a review")
def _(customer_id, add_address, create_product):
    add_address(customer_id)
    current_domain.process(CreateCart(customer_id=customer_id), asynchronous=False)
    current_domain.process(
        SubmitReview(product_id=create_product(), customer_id=customer_id, rating=4),
        asynchronous=False,
    )


@given("the customer has an address used as the shipping address of an order", target_fixture="order_id")
def _(customer_id, add_address, place_order):
    address_id = add_address(customer_id)
    return place_order(customer_id, shipping_address_id=address_id)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the customer is deleted")
def _(customer_id, error):
    try:
        current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)
    except Exception as exc:
        error["exc"] = exc


@when("that address is removed")
def _(customer_id, order_id):
    order = current_domain.repository_for(Order).get(order_id)
    current_domain.process(
        RemoveAddress(customer_id=customer_id, address_id=order.shipping_address_id),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the customer no longer exists")
def _(customer_id):
    with pytest.raises(ObjectNotFoundError):
        current_domain.repository_for(Customer).get(customer_id)


@then("the customer has no carts or reviews left")
def _(customer_id):
    assert find_all(Cart, customer_id=customer_id) == []
    assert find_all(Review, customer_id=customer_id) == []


@then("the order has no shipping address")
def _(order_id):
    assert current_domain.repository_for(Order).get(order_id).shipping_address_id is None
