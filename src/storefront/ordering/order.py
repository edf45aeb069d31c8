"""Order aggregate root with its OrderItem entities.

State Machine:
    pending → processing → shipped → delivered → refunded
    pending | processing → cancelled

The machine is enforced unless ``ENFORCE_STATUS_TRANSITIONS`` is switched off
in the ``[custom]`` section of ``domain.toml``, in which case any status may
follow any other.
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.ordering.events import (
    OrderAmountsUpdated,
    OrderItemAdded,
    OrderPlaced,
    OrderStatusChanged,
)
from storefront.ordering.totals import AMOUNT_FIELDS, compute_total, derive_total, validate_line_item


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: {OrderStatus.REFUNDED},
    OrderStatus.CANCELLED: set(),  # Terminal
    OrderStatus.REFUNDED: set(),  # Terminal
}


def status_transitions_enforced() -> bool:
    return bool(storefront.config.get("custom", {}).get("ENFORCE_STATUS_TRANSITIONS", True))


def generate_order_number(now=None) -> str:
    now = now or datetime.now(UTC)
    return f"ORD-{now:%Y%m%d}-{uuid4().hex[:8].upper()}"


@storefront.entity(part_of="Order")
class OrderItem:
    """A line of an order.

    ``sku_snapshot``, ``name_snapshot`` and ``unit_price`` are copied from the
    product when the line is captured and are not touched afterwards.
    """

    product_id: Identifier(required=True)
    sku_snapshot: String(required=True, max_length=64)
    name_snapshot: String(required=True, max_length=255, sanitize=False)
    unit_price: Float(required=True, min_value=0.0)
    quantity: Integer(required=True, min_value=1)
    line_total: Float(required=True, min_value=0.0)


@storefront.aggregate
class Order:
    customer_id: Identifier(required=True)
    order_number: String(required=True, max_length=50)
    order_date: DateTime()
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    shipping_address_id: Identifier()
    billing_address_id: Identifier()
    subtotal: Float(default=0.0)
    shipping: Float(default=0.0)
    tax: Float(default=0.0)
    total: Float(default=0.0)
    items: HasMany(OrderItem)
    updated_at: DateTime()

    @classmethod
    def place(
        cls,
        customer_id,
        items_data=(),
        order_number=None,
        shipping_address_id=None,
        billing_address_id=None,
        subtotal=None,
        shipping=None,
        tax=None,
        total=None,
    ):
        """Create a pending order.

        Args:
            items_data: dicts with product_id, sku_snapshot, name_snapshot,
                        unit_price and quantity.
            subtotal, shipping, tax: caller-supplied amounts; absent ones
                        count as zero.
            total: accepted for convenience and always replaced by the
                        derived total.
        """
        amounts = {"subtotal": subtotal, "shipping": shipping, "tax": tax}
        compute_total(**amounts)

        lines = []
        for data in items_data:
            line = dict(data)
            validate_line_item(line)
            lines.append(line)

        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            order_number=order_number or generate_order_number(now),
            order_date=now,
            shipping_address_id=shipping_address_id,
            billing_address_id=billing_address_id,
            items=[OrderItem(**line) for line in lines],
            updated_at=now,
            **{field: value for field, value in {**amounts, "total": total}.items() if value is not None},
        )
        derive_total(order)

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                order_number=order.order_number,
                total=order.total,
                placed_at=now,
            )
        )
        return order

    def item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"items": [f"Item {item_id} not found"]})
        return item

    def add_item(self, product_id, sku_snapshot, name_snapshot, unit_price, quantity):
        line = {
            "product_id": product_id,
            "sku_snapshot": sku_snapshot,
            "name_snapshot": name_snapshot,
            "unit_price": unit_price,
            "quantity": quantity,
        }
        validate_line_item(line)

        item = OrderItem(**line)
        self.add_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderItemAdded(
                order_id=self.id,
                item_id=item.id,
                product_id=product_id,
                quantity=item.quantity,
                line_total=item.line_total,
            )
        )
        return item

    def update_amounts(self, subtotal=None, shipping=None, tax=None):
        """Replace the supplied amounts and derive the total again.

        ``None`` leaves a component as it is. The new values are validated
        before any of them is assigned.
        """
        changes = {"subtotal": subtotal, "shipping": shipping, "tax": tax}
        merged = {field: self._amount_or(field, changes[field]) for field in AMOUNT_FIELDS}
        compute_total(**merged)

        with atomic_change(self):
            for field, value in merged.items():
                setattr(self, field, value)
            derive_total(self)
            self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderAmountsUpdated(
                order_id=self.id,
                subtotal=self.subtotal,
                shipping=self.shipping,
                tax=self.tax,
                total=self.total,
            )
        )

    def _amount_or(self, field, value):
        return getattr(self, field) if value is None else value

    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def change_status(self, status, enforce=None):
        try:
            target = OrderStatus(status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {status}"]}) from None

        if enforce is None:
            enforce = status_transitions_enforced()
        if enforce:
            self._assert_can_transition(target)

        previous_status = self.status
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous_status,
                status=target.value,
                changed_at=now,
            )
        )
