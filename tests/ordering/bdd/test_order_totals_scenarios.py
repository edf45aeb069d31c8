"""BDD tests for order total derivation."""

import json

from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when
from storefront.ordering.creation import PlaceOrder
from storefront.ordering.modification import UpdateOrderAmounts
from storefront.ordering.order import Order

scenarios("features/order_totals.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse("the customer places an order with subtotal {subtotal}, shipping {shipping} and tax {tax}"),
    target_fixture="order_id",
)
def _(place_order, customer_id, subtotal, shipping, tax):
    return place_order(customer_id, subtotal=float(subtotal), shipping=float(shipping), tax=float(tax))


@when("the customer places an order without amounts", target_fixture="order_id")
def _(place_order, customer_id):
    return place_order(customer_id)


@when(parsers.cfparse("the {component} is changed to {amount}"))
def _(order_id, error, component, amount):
    try:
        current_domain.process(
            UpdateOrderAmounts(order_id=order_id, **{component: float(amount)}),
            asynchronous=False,
        )
    except Exception as exc:
        error["exc"] = exc


@when(parsers.cfparse('the customer orders {quantity:d} of "{sku}"'), target_fixture="order_id")
def _(customer_id, catalogue, error, quantity, sku):
    command = PlaceOrder(
        customer_id=customer_id,
        items=json.dumps([{"product_id": catalogue[sku], "quantity": quantity}]),
    )
    try:
        return current_domain.process(command, asynchronous=False)
    except Exception as exc:
        error["exc"] = exc
        return None


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the line total is {amount}"))
def _(order_id, amount):
    order = current_domain.repository_for(Order).get(order_id)
    assert order.items[0].line_total == float(amount)
