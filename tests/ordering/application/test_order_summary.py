"""Tests for the read-side order summary."""

from protean import current_domain
from storefront.ordering.summary import NO_PAYMENT, order_summaries
from storefront.payments.recording import RecordPayment


def _pay(order_id, **overrides):
    kwargs = {"order_id": order_id, "payment_method": "card", "paid_amount": 10}
    kwargs.update(overrides)
    return current_domain.process(RecordPayment(**kwargs), asynchronous=False)


class TestOrderSummaries:
    def test_order_without_payment(self, register_customer, place_order):
        order_id = place_order(register_customer(), subtotal=10)

        rows = order_summaries()
        assert len(rows) == 1
        assert rows[0]["order_id"] == order_id
        assert rows[0]["payment_status"] == NO_PAYMENT
        assert rows[0]["total"] == 10.0

    def test_one_row_per_payment(self, register_customer, place_order):
        order_id = place_order(register_customer(), subtotal=20)
        _pay(order_id, payment_status="failed")
        _pay(order_id, payment_status="completed")

        statuses = sorted(row["payment_status"] for row in order_summaries())
        assert statuses == ["completed", "failed"]

    def test_filter_by_customer(self, register_customer, place_order):
        alice = register_customer(first_name="Alice")
        bob = register_customer(first_name="Bob")
        place_order(alice)
        place_order(bob)
        place_order(bob)

        rows = order_summaries(customer_id=bob)
        assert len(rows) == 2
        assert {row["customer_id"] for row in rows} == {bob}

    def test_empty_store(self):
        assert order_summaries() == []
