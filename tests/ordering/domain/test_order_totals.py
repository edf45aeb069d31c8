"""Tests for total derivation on plain records."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from storefront.exceptions import InvalidAmount
from storefront.ordering.totals import compute_total, derive_total, to_amount


class TestDeriveTotal:
    def test_sums_components_exactly(self):
        order = {"subtotal": 309.98, "shipping": 5.00, "tax": 15.50}
        assert derive_total(order) == Decimal("330.48")
        assert order["total"] == Decimal("330.48")

    def test_binary_float_noise_does_not_leak_into_total(self):
        order = {"subtotal": 0.1, "shipping": 0.2, "tax": 0.0}
        assert derive_total(order) == Decimal("0.30")

    def test_absent_components_count_as_zero(self):
        order = {"subtotal": 100}
        assert derive_total(order) == Decimal("100.00")
        assert order["shipping"] == Decimal("0.00")
        assert order["tax"] == Decimal("0.00")

    def test_null_components_are_written_back_as_zero(self):
        order = {"subtotal": None, "shipping": None, "tax": None}
        assert derive_total(order) == Decimal("0.00")
        assert order == {"subtotal": 0, "shipping": 0, "tax": 0, "total": 0}

    def test_caller_supplied_total_is_overwritten(self):
        order = {"subtotal": 10, "shipping": 2, "tax": 1, "total": 999}
        derive_total(order)
        assert order["total"] == Decimal("13.00")

    def test_rederivation_is_idempotent(self):
        order = {"subtotal": 12.345, "shipping": 1.005, "tax": 0.5}
        first = derive_total(order)
        snapshot = dict(order)
        assert derive_total(order) == first
        assert order == snapshot

    def test_components_are_rounded_to_cents(self):
        order = {"subtotal": "10.005", "shipping": "0", "tax": "0"}
        assert derive_total(order) == Decimal("10.01")

    def test_works_on_attribute_objects(self):
        order = SimpleNamespace(subtotal=Decimal("1.10"), shipping=Decimal("2.20"), tax=None, total=None)
        derive_total(order)
        assert order.total == Decimal("3.30")
        assert order.tax == Decimal("0.00")

    @pytest.mark.parametrize("field", ["subtotal", "shipping", "tax"])
    def test_negative_component_is_rejected(self, field):
        order = {"subtotal": 10, "shipping": 2, "tax": 1, "total": 13}
        order[field] = -0.01
        original = dict(order)

        with pytest.raises(InvalidAmount) as exc:
            derive_total(order)

        assert field in exc.value.messages
        assert order == original

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", True, [1]])
    def test_non_numeric_component_is_rejected(self, value):
        order = {"subtotal": value, "shipping": 0, "tax": 0}
        with pytest.raises(InvalidAmount):
            derive_total(order)
        assert "total" not in order


class TestAmountHelpers:
    def test_to_amount_accepts_strings_and_ints(self):
        assert to_amount("19.9") == Decimal("19.90")
        assert to_amount(3) == Decimal("3.00")

    def test_to_amount_zero_is_valid(self):
        assert to_amount(0) == Decimal("0.00")

    def test_compute_total_does_not_need_a_record(self):
        assert compute_total(subtotal=1, shipping=2, tax=3) == Decimal("6.00")

    def test_compute_total_reports_the_offending_field(self):
        with pytest.raises(InvalidAmount) as exc:
            compute_total(subtotal=1, shipping=-2)
        assert "shipping" in exc.value.messages
