"""Customer profile maintenance: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.customer import Customer
from storefront.integrity import propagation


@storefront.command(part_of="Customer")
class DeleteCustomer:
    """Delete a customer profile with its addresses, carts and reviews.

    Rejected while the customer has orders.
    """

    customer_id: Identifier(required=True)


@storefront.command(part_of="Customer")
class AwardLoyaltyPoints:
    customer_id: Identifier(required=True)
    points: Integer(required=True)


@storefront.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(DeleteCustomer)
    def delete_customer(self, command):
        customer = current_domain.repository_for(Customer).get(command.customer_id)
        propagation.delete(customer)

    @handle(AwardLoyaltyPoints)
    def award_loyalty_points(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.award_loyalty_points(command.points)
        repo.add(customer)
