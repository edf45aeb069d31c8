"""Repository for the Order aggregate."""

import structlog

from storefront.domain import storefront
from storefront.ordering.order import Order
from storefront.ordering.totals import derive_total
from storefront.shared.queries import ensure_unique, find_all

logger = structlog.get_logger(__name__)


@storefront.repository(part_of=Order)
class OrderRepository:
    """Persists orders with their total derived from the current components.

    Whatever ``total`` the caller left on the order is overwritten here, so no
    write path can store an order whose total disagrees with its parts.
    """

    def add(self, order):
        stale_total = order.total
        total = derive_total(order)
        if stale_total is not None and float(stale_total) != float(total):
            logger.info("order_total_overridden", order_id=str(order.id), supplied=stale_total, derived=str(total))

        ensure_unique(Order, exclude_id=order.id, order_number=order.order_number)
        return super().add(order)

    def find_by_customer(self, customer_id) -> list[Order]:
        return find_all(Order, customer_id=str(customer_id))

    def find_by_number(self, order_number) -> Order | None:
        orders = find_all(Order, order_number=order_number)
        return orders[0] if orders else None
