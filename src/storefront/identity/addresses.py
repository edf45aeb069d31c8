"""Customer address management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.customer import Customer
from storefront.integrity import propagation


@storefront.command(part_of="Customer")
class AddAddress:
    """Add a new address to a customer's address book."""

    customer_id: Identifier(required=True)
    label: String(max_length=50)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    postal_code: String(max_length=30)
    country: String(required=True, max_length=100)
    is_default_shipping: Boolean(default=False)
    is_default_billing: Boolean(default=False)


@storefront.command(part_of="Customer")
class RemoveAddress:
    """Remove an address; orders that pointed at it keep going without it."""

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@storefront.command_handler(part_of=Customer)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        kwargs = {
            "street": command.street,
            "city": command.city,
            "country": command.country,
            "state": command.state,
            "postal_code": command.postal_code,
            "is_default_shipping": command.is_default_shipping,
            "is_default_billing": command.is_default_billing,
        }
        if command.label:
            kwargs["label"] = command.label

        address = customer.add_address(**kwargs)
        repo.add(customer)
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        address = customer.remove_address(command.address_id)
        repo.add(customer)
        propagation.release(address)
