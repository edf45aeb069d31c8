"""Read-side order summary.

One row per order and payment pair; an order without payments still
appears once, with ``payment_status`` set to ``no_payment``.
"""

from storefront.ordering.order import Order
from storefront.payments.payment import Payment
from storefront.shared.queries import find_all

NO_PAYMENT = "no_payment"


def _row(order, payment_status):
    return {
        "order_id": str(order.id),
        "order_number": order.order_number,
        "customer_id": str(order.customer_id),
        "order_date": order.order_date,
        "status": order.status,
        "total": order.total,
        "payment_status": payment_status,
    }


def order_summaries(customer_id=None) -> list[dict]:
    filters = {"customer_id": str(customer_id)} if customer_id is not None else {}
    payments_by_order = {}
    for payment in find_all(Payment):
        payments_by_order.setdefault(str(payment.order_id), []).append(payment)

    rows = []
    for order in sorted(find_all(Order, **filters), key=lambda o: (o.order_date, o.order_number)):
        payments = payments_by_order.get(str(order.id))
        if not payments:
            rows.append(_row(order, NO_PAYMENT))
            continue
        rows.extend(_row(order, payment.payment_status) for payment in payments)
    return rows
