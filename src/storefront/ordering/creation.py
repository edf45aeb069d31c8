"""Order placement: command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.exceptions import ConstraintViolation
from storefront.identity.customer import Customer
from storefront.ordering.order import Order
from storefront.shared.queries import require
from storefront.utils.logging import log_context


@storefront.command(part_of="Order")
class PlaceOrder:
    """Place an order for a customer.

    ``items`` is a JSON list of ``{"product_id", "quantity"}``. SKU, name and
    unit price are captured from the product at this moment.
    """

    customer_id: Identifier(required=True)
    items: Text()
    order_number: String(max_length=50)
    shipping_address_id: Identifier()
    billing_address_id: Identifier()
    subtotal: Float()
    shipping: Float()
    tax: Float()
    total: Float()  # Ignored: the total is always derived


def owned_address(customer, address_id, field):
    """``address_id`` if it belongs to ``customer``'s address book."""
    if address_id is None:
        return None
    if not any(str(address.id) == str(address_id) for address in customer.addresses):
        raise ConstraintViolation(
            {field: [f"Address {address_id} does not belong to customer {customer.id}"]},
            rule="reference:Address",
        )
    return address_id


def parse_items(payload):
    """Decode an ``items`` payload into ``(product_id, quantity)`` pairs."""
    if not payload:
        return []
    try:
        items = json.loads(payload) if isinstance(payload, str) else payload
    except json.JSONDecodeError:
        raise ValidationError({"items": ["Items must be valid JSON"]}) from None

    if not isinstance(items, list):
        raise ValidationError({"items": ["Items must be a list"]})
    for position, item in enumerate(items):
        if not isinstance(item, dict) or not item.get("product_id"):
            raise ValidationError({"items": [f"Item {position} has no product_id"]})
    return [(item["product_id"], item.get("quantity")) for item in items]


def snapshot_line(product_id, quantity):
    product = require(Product, product_id, field="product_id")
    return {
        "product_id": product.id,
        "sku_snapshot": product.sku,
        "name_snapshot": product.name,
        "unit_price": product.price,
        "quantity": quantity,
    }


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        with log_context(customer_id=command.customer_id):
            customer = require(Customer, command.customer_id, field="customer_id")
            lines = [snapshot_line(product_id, quantity) for product_id, quantity in parse_items(command.items)]

            order = Order.place(
                customer_id=customer.id,
                items_data=lines,
                order_number=command.order_number,
                shipping_address_id=owned_address(customer, command.shipping_address_id, "shipping_address_id"),
                billing_address_id=owned_address(customer, command.billing_address_id, "billing_address_id"),
                subtotal=command.subtotal,
                shipping=command.shipping,
                tax=command.tax,
                total=command.total,
            )
            current_domain.repository_for(Order).add(order)
        return str(order.id)
