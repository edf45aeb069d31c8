"""Tests for OrderRepository: derivation on save, order number uniqueness and finders."""

import pytest
from protean import current_domain
from storefront.exceptions import ConstraintViolation
from storefront.ordering.order import Order


@pytest.fixture()
def customer_id(register_customer):
    return register_customer()


@pytest.fixture()
def repo():
    return current_domain.repository_for(Order)


class TestDerivationOnSave:
    def test_tampered_total_is_replaced(self, repo, place_order, customer_id):
        order = repo.get(place_order(customer_id, subtotal=20, shipping=2, tax=1))
        order.total = 999.0
        repo.add(order)

        assert repo.get(order.id).total == 23.0

    def test_component_assigned_directly_is_summed_on_save(self, repo, place_order, customer_id):
        order = repo.get(place_order(customer_id, subtotal=20, shipping=2, tax=1))
        order.shipping = 7.5
        repo.add(order)

        assert repo.get(order.id).total == 28.5


class TestOrderNumber:
    def test_duplicate_order_number_is_rejected(self, place_order, customer_id):
        place_order(customer_id, order_number="ORD-20250101-0001")

        with pytest.raises(ConstraintViolation) as exc:
            place_order(customer_id, order_number="ORD-20250101-0001")
        assert exc.value.rule == "unique:Order.order_number"

    def test_resaving_an_order_keeps_its_number(self, repo, place_order, customer_id):
        order = repo.get(place_order(customer_id, order_number="ORD-20250101-0002"))
        repo.add(order)

        assert repo.find_by_number("ORD-20250101-0002").id == order.id


class TestFinders:
    def test_find_by_customer(self, repo, place_order, register_customer, customer_id):
        first = place_order(customer_id)
        second = place_order(customer_id)
        place_order(register_customer())

        found = {str(order.id) for order in repo.find_by_customer(customer_id)}
        assert found == {str(first), str(second)}

    def test_find_by_number_without_match(self, repo):
        assert repo.find_by_number("ORD-00000000-MISSING") is None
