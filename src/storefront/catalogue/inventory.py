"""Stock level record, one per product and keyed by the product's identifier."""

from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer

from storefront.domain import storefront


@storefront.aggregate
class ProductInventory:
    product_id: Identifier(identifier=True, required=True)
    quantity: Integer(default=0, min_value=0)
    re_order_level: Integer(default=10, min_value=0)
    is_backorder_allowed: Boolean(default=False)

    @property
    def needs_reorder(self):
        return self.quantity <= self.re_order_level

    def adjust(self, delta):
        """Add ``delta`` units (negative to withdraw); stock never goes below zero."""
        new_quantity = (self.quantity or 0) + delta
        if new_quantity < 0:
            raise ValidationError({"quantity": [f"Insufficient stock: {self.quantity} on hand, {-delta} requested"]})
        self.quantity = new_quantity
