"""Product classification, sourcing and stock: commands and handlers."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.inventory import ProductInventory
from storefront.catalogue.links import ProductCategory, ProductSupplier
from storefront.catalogue.product import Product
from storefront.catalogue.supplier import Supplier
from storefront.domain import storefront
from storefront.shared.queries import ensure_unique, find_all, require


@storefront.command(part_of="ProductCategory")
class LinkProductCategory:
    product_id: Identifier(required=True)
    category_id: Identifier(required=True)


@storefront.command(part_of="ProductCategory")
class UnlinkProductCategory:
    product_id: Identifier(required=True)
    category_id: Identifier(required=True)


@storefront.command(part_of="ProductSupplier")
class LinkProductSupplier:
    product_id: Identifier(required=True)
    supplier_id: Identifier(required=True)
    supplier_sku: String(max_length=128)
    cost_price: Float()


@storefront.command(part_of="ProductInventory")
class AdjustInventory:
    """Add stock (positive ``delta``) or withdraw it (negative ``delta``)."""

    product_id: Identifier(required=True)
    delta: Integer(required=True)


@storefront.command_handler(part_of=ProductCategory)
class ProductCategoryHandler:
    @handle(LinkProductCategory)
    def link(self, command):
        require(Product, command.product_id)
        require(Category, command.category_id)
        ensure_unique(ProductCategory, product_id=str(command.product_id), category_id=str(command.category_id))

        link = ProductCategory(product_id=command.product_id, category_id=command.category_id)
        current_domain.repository_for(ProductCategory).add(link)
        return str(link.id)

    @handle(UnlinkProductCategory)
    def unlink(self, command):
        links = find_all(ProductCategory, product_id=str(command.product_id), category_id=str(command.category_id))
        dao = current_domain.repository_for(ProductCategory)._dao
        for link in links:
            dao.delete(link)


@storefront.command_handler(part_of=ProductSupplier)
class ProductSupplierHandler:
    @handle(LinkProductSupplier)
    def link(self, command):
        require(Product, command.product_id)
        require(Supplier, command.supplier_id)
        ensure_unique(ProductSupplier, product_id=str(command.product_id), supplier_id=str(command.supplier_id))

        link = ProductSupplier.link(
            product_id=command.product_id,
            supplier_id=command.supplier_id,
            supplier_sku=command.supplier_sku,
            cost_price=command.cost_price,
        )
        current_domain.repository_for(ProductSupplier).add(link)
        return str(link.id)


@storefront.command_handler(part_of=ProductInventory)
class AdjustInventoryHandler:
    @handle(AdjustInventory)
    def adjust(self, command):
        repo = current_domain.repository_for(ProductInventory)
        inventory = repo.get(command.product_id)
        inventory.adjust(command.delta)
        repo.add(inventory)
        return inventory.quantity
