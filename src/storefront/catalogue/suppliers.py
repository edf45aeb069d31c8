"""Supplier management: commands and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.supplier import Supplier
from storefront.domain import storefront
from storefront.integrity import propagation


@storefront.command(part_of="Supplier")
class CreateSupplier:
    name: String(required=True, max_length=255, sanitize=False)
    contact_email: String(max_length=255)
    phone: String(max_length=30)
    address: Text(sanitize=False)


@storefront.command(part_of="Supplier")
class DeleteSupplier:
    supplier_id: Identifier(required=True)


@storefront.command_handler(part_of=Supplier)
class ManageSupplierHandler:
    @handle(CreateSupplier)
    def create_supplier(self, command):
        supplier = Supplier.register(
            name=command.name,
            contact_email=command.contact_email,
            phone=command.phone,
            address=command.address,
        )
        current_domain.repository_for(Supplier).add(supplier)
        return str(supplier.id)

    @handle(DeleteSupplier)
    def delete_supplier(self, command):
        supplier = current_domain.repository_for(Supplier).get(command.supplier_id)
        propagation.delete(supplier)
