"""Order removal: command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.integrity import propagation
from storefront.ordering.order import Order


@storefront.command(part_of="Order")
class DeleteOrder:
    """Delete an order together with its items and payments."""

    order_id: Identifier(required=True)


@storefront.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        order = current_domain.repository_for(Order).get(command.order_id)
        propagation.delete(order)
