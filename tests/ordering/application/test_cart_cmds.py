"""Application tests for cart commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from storefront.exceptions import ConstraintViolation, InvalidQuantity
from storefront.ordering.cart import Cart
from storefront.ordering.carts import AddToCart, CreateCart, DeleteCart, RemoveFromCart, UpdateCartQuantity


@pytest.fixture()
def cart_id(register_customer):
    return current_domain.process(CreateCart(customer_id=register_customer()), asynchronous=False)


def _add(cart_id, product_id, quantity=1):
    return current_domain.process(
        AddToCart(cart_id=cart_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


class TestCartCommands:
    def test_create_cart_for_unknown_customer(self):
        with pytest.raises(ConstraintViolation):
            current_domain.process(CreateCart(customer_id="cust-missing"), asynchronous=False)

    def test_add_to_cart(self, cart_id, create_product):
        product_id = create_product()
        _add(cart_id, product_id, 2)

        cart = current_domain.repository_for(Cart).get(cart_id)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_add_unknown_product(self, cart_id):
        with pytest.raises(ConstraintViolation) as exc:
            _add(cart_id, "prod-missing")
        assert exc.value.rule == "reference:Product"

    def test_product_appears_once_per_cart(self, cart_id, create_product):
        product_id = create_product()
        _add(cart_id, product_id)
        with pytest.raises(ConstraintViolation):
            _add(cart_id, product_id)

    def test_update_quantity(self, cart_id, create_product):
        product_id = create_product()
        _add(cart_id, product_id)
        current_domain.process(
            UpdateCartQuantity(cart_id=cart_id, product_id=product_id, quantity=4),
            asynchronous=False,
        )
        assert current_domain.repository_for(Cart).get(cart_id).items[0].quantity == 4

    def test_update_quantity_to_zero(self, cart_id, create_product):
        product_id = create_product()
        _add(cart_id, product_id)
        with pytest.raises(InvalidQuantity):
            current_domain.process(
                UpdateCartQuantity(cart_id=cart_id, product_id=product_id, quantity=0),
                asynchronous=False,
            )

    def test_remove_from_cart(self, cart_id, create_product):
        product_id = create_product()
        _add(cart_id, product_id)
        current_domain.process(RemoveFromCart(cart_id=cart_id, product_id=product_id), asynchronous=False)
        assert len(current_domain.repository_for(Cart).get(cart_id).items) == 0

    def test_delete_cart(self, cart_id, create_product):
        _add(cart_id, create_product())
        current_domain.process(DeleteCart(cart_id=cart_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Cart).get(cart_id)
