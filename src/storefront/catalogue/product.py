"""Product aggregate root with its ProductImage entities."""

from datetime import UTC, datetime

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, String, Text

from storefront.domain import storefront
from storefront.ordering.totals import to_amount


@storefront.entity(part_of="Product")
class ProductImage:
    url: String(required=True, max_length=1024)
    alt_text: String(max_length=255)
    is_primary: Boolean(default=False)
    created_at: DateTime()


@storefront.aggregate
class Product:
    """A sellable catalogue entry, identified externally by its SKU.

    Order items copy the SKU, name and price at order time, so later edits
    here never rewrite order history.
    """

    sku: String(required=True, max_length=64)
    name: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(required=True, min_value=0.0)
    weight_kg: Float(min_value=0.0)
    active: Boolean(default=True)
    images: HasMany(ProductImage)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, sku, name, price, description=None, weight_kg=None):
        now = datetime.now(UTC)
        if weight_kg is not None and weight_kg < 0:
            raise ValidationError({"weight_kg": ["Weight cannot be negative"]})

        return cls(
            sku=sku.strip(),
            name=name,
            description=description,
            price=to_amount(price, "price"),
            weight_kg=weight_kg,
            created_at=now,
            updated_at=now,
        )

    def reprice(self, price):
        self.price = to_amount(price, "price")
        self.updated_at = datetime.now(UTC)

    def add_image(self, url, alt_text=None, is_primary=False):
        with atomic_change(self):
            if is_primary:
                for image in self.images:
                    image.is_primary = False

            image = ProductImage(
                url=url,
                alt_text=alt_text,
                is_primary=is_primary,
                created_at=datetime.now(UTC),
            )
            self.add_images(image)

        self.updated_at = datetime.now(UTC)
        return image

    def deactivate(self):
        self.active = False
        self.updated_at = datetime.now(UTC)
