"""Order total derivation and line-item validation.

The order total is never stored independently of its components:

    total = subtotal + shipping + tax

Every write path that creates an order or touches one of the three
components goes through :func:`derive_total`, and ``OrderRepository.add``
derives once more right before persisting. A total supplied by a caller is
therefore overwritten, never trusted.

Amounts are handled as ``Decimal`` normalised to cents (the precision of the
stored columns), so sums such as ``309.98 + 5.00 + 15.50`` come out exact.
Absent components count as zero and are written back as zero.
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import structlog

from storefront.exceptions import InvalidAmount, InvalidQuantity

logger = structlog.get_logger(__name__)

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

AMOUNT_FIELDS = ("subtotal", "shipping", "tax")


def to_amount(value, field="amount") -> Decimal:
    """Convert ``value`` to a non-negative, cent-precision ``Decimal``.

    ``None`` is read as zero. Floats go through ``str`` so that ``9.99`` stays
    ``9.99`` instead of picking up binary representation noise.
    """
    if value is None:
        return ZERO
    if isinstance(value, bool):
        raise InvalidAmount({field: [f"{value!r} is not a monetary amount"]})

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmount({field: [f"{value!r} is not a monetary amount"]}) from None

    if not amount.is_finite():
        raise InvalidAmount({field: [f"{value!r} is not a monetary amount"]})
    if amount < 0:
        raise InvalidAmount({field: [f"Amount cannot be negative, got {value}"]})

    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_quantity(value, field="quantity") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantity({field: [f"Quantity must be a whole number, got {value!r}"]})
    if value <= 0:
        raise InvalidQuantity({field: [f"Quantity must be greater than zero, got {value}"]})
    return value


def compute_total(subtotal=None, shipping=None, tax=None) -> Decimal:
    """Validate the three components and return their exact sum."""
    return to_amount(subtotal, "subtotal") + to_amount(shipping, "shipping") + to_amount(tax, "tax")


def _read(record, field):
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _write(record, field, value):
    if isinstance(record, Mapping):
        record[field] = value
    else:
        setattr(record, field, value)


def derive_total(order) -> Decimal:
    """Recompute ``order.total`` from its subtotal, shipping and tax.

    All three components are validated before anything is written, so an
    ``InvalidAmount`` leaves the order exactly as it was. Works on Protean
    aggregates, plain objects and mutable mappings.
    """
    amounts = {field: to_amount(_read(order, field), field) for field in AMOUNT_FIELDS}
    total = sum(amounts.values(), ZERO)

    for field, amount in amounts.items():
        _write(order, field, amount)
    _write(order, "total", total)

    logger.debug("order_total_derived", total=str(total), **{k: str(v) for k, v in amounts.items()})
    return total


def validate_line_item(item) -> Decimal:
    """Check ``unit_price`` and ``quantity`` and set ``line_total``.

    Raises ``InvalidQuantity`` for a zero, negative or fractional quantity and
    ``InvalidAmount`` for a negative or non-numeric unit price.
    """
    quantity = to_quantity(_read(item, "quantity"))
    if _read(item, "unit_price") is None:
        raise InvalidAmount({"unit_price": ["Unit price is required"]})
    unit_price = to_amount(_read(item, "unit_price"), "unit_price")

    line_total = (unit_price * quantity).quantize(CENTS, rounding=ROUND_HALF_UP)
    _write(item, "line_total", line_total)
    return line_total
