"""Shopping cart: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.identity.customer import Customer
from storefront.integrity import propagation
from storefront.ordering.cart import Cart
from storefront.shared.queries import require


@storefront.command(part_of="Cart")
class CreateCart:
    customer_id: Identifier(required=True)


@storefront.command(part_of="Cart")
class AddToCart:
    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(default=1)


@storefront.command(part_of="Cart")
class UpdateCartQuantity:
    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command(part_of="Cart")
class DeleteCart:
    cart_id: Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class CartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        customer = require(Customer, command.customer_id, field="customer_id")
        cart = Cart.open(customer_id=customer.id)
        current_domain.repository_for(Cart).add(cart)
        return str(cart.id)

    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        product = require(Product, command.product_id, field="product_id")
        item = cart.add_item(product.id, command.quantity)
        repo.add(cart)
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.update_quantity(command.product_id, command.quantity)
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.remove_item(command.product_id)
        repo.add(cart)

    @handle(DeleteCart)
    def delete_cart(self, command):
        cart = current_domain.repository_for(Cart).get(command.cart_id)
        propagation.delete(cart)
