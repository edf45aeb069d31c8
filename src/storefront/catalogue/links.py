"""Link records between products and their categories or suppliers.

Each link is its own aggregate so that it can be removed on its own and
swept away when either end is deleted. A (product, category) or
(product, supplier) pair exists at most once.
"""

from protean.fields import Float, Identifier, String

from storefront.domain import storefront
from storefront.ordering.totals import to_amount


@storefront.aggregate
class ProductCategory:
    product_id: Identifier(required=True)
    category_id: Identifier(required=True)


@storefront.aggregate
class ProductSupplier:
    product_id: Identifier(required=True)
    supplier_id: Identifier(required=True)
    supplier_sku: String(max_length=128)
    cost_price: Float(min_value=0.0)

    @classmethod
    def link(cls, product_id, supplier_id, supplier_sku=None, cost_price=None):
        return cls(
            product_id=product_id,
            supplier_id=supplier_id,
            supplier_sku=supplier_sku,
            cost_price=None if cost_price is None else to_amount(cost_price, "cost_price"),
        )
