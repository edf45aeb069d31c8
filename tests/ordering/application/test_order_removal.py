"""Application tests for DeleteOrder."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from storefront.ordering.order import Order
from storefront.ordering.removal import DeleteOrder
from storefront.payments.payment import Payment
from storefront.payments.recording import RecordPayment
from storefront.shared.queries import find_all


@pytest.fixture()
def order_id(register_customer, create_product, place_order):
    product_id = create_product()
    return place_order(register_customer(), items=[{"product_id": product_id, "quantity": 1}], subtotal=29.99)


class TestDeleteOrder:
    def test_order_is_removed(self, order_id):
        current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Order).get(order_id)

    def test_payments_are_removed_with_the_order(self, order_id, register_customer, place_order):
        current_domain.process(
            RecordPayment(order_id=order_id, payment_method="card", paid_amount=29.99),
            asynchronous=False,
        )
        other_order = place_order(register_customer())
        current_domain.process(
            RecordPayment(order_id=other_order, payment_method="wallet", paid_amount=5),
            asynchronous=False,
        )

        current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)

        remaining = find_all(Payment)
        assert [str(p.order_id) for p in remaining] == [other_order]

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeleteOrder(order_id="ord-missing"), asynchronous=False)
