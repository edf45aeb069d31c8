"""Order modification: commands and handler.

Every change to subtotal, shipping or tax re-derives the total before the
order is saved.
"""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.creation import snapshot_line
from storefront.ordering.order import Order
from storefront.utils.logging import log_context


@storefront.command(part_of="Order")
class AddOrderItem:
    order_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.command(part_of="Order")
class UpdateOrderAmounts:
    """Change any of subtotal, shipping and tax. Omitted amounts stay as they are."""

    order_id: Identifier(required=True)
    subtotal: Float()
    shipping: Float()
    tax: Float()


@storefront.command(part_of="Order")
class ChangeOrderStatus:
    order_id: Identifier(required=True)
    status: String(required=True, max_length=20)


@storefront.command_handler(part_of=Order)
class ModifyOrderHandler:
    @handle(AddOrderItem)
    def add_item(self, command):
        with log_context(order_id=command.order_id):
            repo = current_domain.repository_for(Order)
            order = repo.get(command.order_id)
            item = order.add_item(**snapshot_line(command.product_id, command.quantity))
            repo.add(order)
            return str(item.id)

    @handle(UpdateOrderAmounts)
    def update_amounts(self, command):
        with log_context(order_id=command.order_id):
            repo = current_domain.repository_for(Order)
            order = repo.get(command.order_id)
            order.update_amounts(
                subtotal=command.subtotal,
                shipping=command.shipping,
                tax=command.tax,
            )
            repo.add(order)
            return order.total

    @handle(ChangeOrderStatus)
    def change_status(self, command):
        with log_context(order_id=command.order_id):
            repo = current_domain.repository_for(Order)
            order = repo.get(command.order_id)
            order.change_status(command.status)
            repo.add(order)
