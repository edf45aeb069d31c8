"""Payment recording: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order import Order
from storefront.payments.payment import Payment
from storefront.shared.queries import ensure_unique, require


@storefront.command(part_of="Payment")
class RecordPayment:
    order_id: Identifier(required=True)
    payment_method: String(required=True, max_length=20)
    paid_amount: Float(required=True)
    transaction_reference: String(max_length=255)
    payment_status: String(max_length=20)


@storefront.command(part_of="Payment")
class UpdatePaymentStatus:
    payment_id: Identifier(required=True)
    payment_status: String(required=True, max_length=20)


@storefront.command_handler(part_of=Payment)
class PaymentHandler:
    @handle(RecordPayment)
    def record_payment(self, command):
        order = require(Order, command.order_id, field="order_id")
        ensure_unique(Payment, transaction_reference=command.transaction_reference)

        payment = Payment.record(
            order_id=order.id,
            payment_method=command.payment_method,
            paid_amount=command.paid_amount,
            transaction_reference=command.transaction_reference,
            payment_status=command.payment_status,
        )
        current_domain.repository_for(Payment).add(payment)
        return str(payment.id)

    @handle(UpdatePaymentStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.mark(command.payment_status)
        repo.add(payment)
