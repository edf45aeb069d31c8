"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer placed a new order."""

    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    order_number: String(required=True)
    total: Float(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderItemAdded:
    __version__ = 1

    order_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    line_total: Float(required=True)


@storefront.event(part_of="Order")
class OrderAmountsUpdated:
    """Subtotal, shipping or tax changed and the total was derived again."""

    __version__ = 1

    order_id: Identifier(required=True)
    subtotal: Float(required=True)
    shipping: Float(required=True)
    tax: Float(required=True)
    total: Float(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    status: String(required=True)
    changed_at: DateTime(required=True)
