"""Cart aggregate root with its CartItem entities."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.domain import storefront
from storefront.exceptions import ConstraintViolation
from storefront.ordering.totals import to_quantity


@storefront.entity(part_of="Cart")
class CartItem:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    added_at: DateTime()


@storefront.aggregate
class Cart:
    """A customer's shopping cart. A product appears in a cart at most once."""

    customer_id: Identifier(required=True)
    items: HasMany(CartItem)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def open(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    def item_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def _item_or_error(self, product_id):
        item = self.item_for(product_id)
        if item is None:
            raise ValidationError({"items": [f"Product {product_id} is not in the cart"]})
        return item

    def add_item(self, product_id, quantity=1):
        quantity = to_quantity(quantity)
        if self.item_for(product_id) is not None:
            raise ConstraintViolation(
                {"product_id": [f"Product {product_id} is already in the cart"]},
                rule="unique:CartItem.cart_id+product_id",
            )

        now = datetime.now(UTC)
        item = CartItem(product_id=product_id, quantity=quantity, added_at=now)
        self.add_items(item)
        self.updated_at = now
        return item

    def update_quantity(self, product_id, quantity):
        item = self._item_or_error(product_id)
        item.quantity = to_quantity(quantity)
        self.updated_at = datetime.now(UTC)
        return item

    def remove_item(self, product_id):
        item = self._item_or_error(product_id)
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        return item
