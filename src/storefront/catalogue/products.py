"""Product management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.inventory import ProductInventory
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.integrity import propagation
from storefront.shared.queries import ensure_unique


@storefront.command(part_of="Product")
class CreateProduct:
    """Add a product to the catalogue together with its stock record."""

    sku: String(required=True, max_length=64)
    name: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(required=True)
    weight_kg: Float()
    initial_quantity: Integer(default=0)
    re_order_level: Integer(default=10)
    is_backorder_allowed: Boolean(default=False)


@storefront.command(part_of="Product")
class UpdateProductPrice:
    """Change the list price. Existing order items keep the price they captured."""

    product_id: Identifier(required=True)
    price: Float(required=True)


@storefront.command(part_of="Product")
class AddProductImage:
    product_id: Identifier(required=True)
    url: String(required=True, max_length=1024)
    alt_text: String(max_length=255)
    is_primary: Boolean(default=False)


@storefront.command(part_of="Product")
class DeleteProduct:
    """Delete a product with its images, links, stock record and reviews.

    Rejected while any order or cart still holds the product.
    """

    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            sku=command.sku,
            name=command.name,
            price=command.price,
            description=command.description,
            weight_kg=command.weight_kg,
        )
        ensure_unique(Product, sku=product.sku)
        current_domain.repository_for(Product).add(product)

        inventory = ProductInventory(
            product_id=product.id,
            quantity=command.initial_quantity,
            re_order_level=command.re_order_level,
            is_backorder_allowed=command.is_backorder_allowed,
        )
        current_domain.repository_for(ProductInventory).add(inventory)
        return str(product.id)

    @handle(UpdateProductPrice)
    def update_product_price(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.reprice(command.price)
        repo.add(product)

    @handle(AddProductImage)
    def add_product_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        image = product.add_image(
            url=command.url,
            alt_text=command.alt_text,
            is_primary=command.is_primary,
        )
        repo.add(product)
        return str(image.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        propagation.delete(product)
