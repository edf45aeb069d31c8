"""Payment aggregate: a payment recorded against an order."""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront
from storefront.ordering.totals import to_amount


class PaymentMethod(Enum):
    CARD = "card"
    PAYPAL = "paypal"
    BANK_TRANSFER = "bank_transfer"
    WALLET = "wallet"


class PaymentStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


@storefront.aggregate
class Payment:
    order_id: Identifier(required=True)
    payment_method: String(required=True, choices=PaymentMethod)
    payment_status: String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    paid_amount: Float(required=True, min_value=0.0)
    transaction_reference: String(max_length=255)
    paid_at: DateTime()
    created_at: DateTime()

    @classmethod
    def record(cls, order_id, payment_method, paid_amount, transaction_reference=None, payment_status=None):
        now = datetime.now(UTC)
        payment = cls(
            order_id=order_id,
            payment_method=payment_method,
            paid_amount=to_amount(paid_amount, "paid_amount"),
            transaction_reference=transaction_reference,
            created_at=now,
        )
        if payment_status is not None:
            payment.mark(payment_status)
        return payment

    def mark(self, payment_status):
        try:
            status = PaymentStatus(payment_status)
        except ValueError:
            raise ValidationError({"payment_status": [f"Unknown payment status: {payment_status}"]}) from None

        self.payment_status = status.value
        if status is PaymentStatus.COMPLETED and self.paid_at is None:
            self.paid_at = datetime.now(UTC)
