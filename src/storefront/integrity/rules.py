"""What happens to dependent records when a parent record is deleted.

Each :class:`Rule` ties a parent record type to one kind of dependent and
names the policy applied to it:

* ``CASCADE``: the dependent is deleted too, and its own rules run in turn.
* ``RESTRICT``: the delete is rejected while any such dependent exists.
* ``SET_NULL``: the dependent's reference field is cleared and it is kept.

Dependents are found in one of two ways:

* ``field``: records whose ``field`` holds the parent's identifier. Entities
  held by other aggregates are looked up the same way, through their own
  store.
* ``collection``: entities held in the parent's own ``HasMany``.
"""

from dataclasses import dataclass
from enum import Enum

from storefront.catalogue.category import Category
from storefront.catalogue.inventory import ProductInventory
from storefront.catalogue.links import ProductCategory, ProductSupplier
from storefront.catalogue.product import Product, ProductImage
from storefront.catalogue.supplier import Supplier
from storefront.identity.account import Account
from storefront.identity.customer import Address, Customer
from storefront.ordering.cart import Cart, CartItem
from storefront.ordering.order import Order, OrderItem
from storefront.payments.payment import Payment
from storefront.reviews.review import Review


class Policy(Enum):
    CASCADE = "cascade"
    RESTRICT = "restrict"
    SET_NULL = "set_null"


@dataclass(frozen=True)
class Rule:
    parent: type
    dependent: type
    policy: Policy
    field: str | None = None
    collection: str | None = None

    @property
    def label(self) -> str:
        target = f"{self.dependent.__name__}.{self.field}" if self.field else self.dependent.__name__
        return f"{self.parent.__name__}->{target}:{self.policy.value}"


RULES = (
    Rule(Account, Customer, Policy.CASCADE, field="id"),
    Rule(Customer, Address, Policy.CASCADE, collection="addresses"),
    Rule(Customer, Cart, Policy.CASCADE, field="customer_id"),
    Rule(Customer, Review, Policy.CASCADE, field="customer_id"),
    Rule(Customer, Order, Policy.RESTRICT, field="customer_id"),
    Rule(Address, Order, Policy.SET_NULL, field="shipping_address_id"),
    Rule(Address, Order, Policy.SET_NULL, field="billing_address_id"),
    Rule(Category, Category, Policy.SET_NULL, field="parent_id"),
    Rule(Category, ProductCategory, Policy.CASCADE, field="category_id"),
    Rule(Product, ProductCategory, Policy.CASCADE, field="product_id"),
    Rule(Product, ProductSupplier, Policy.CASCADE, field="product_id"),
    Rule(Product, ProductInventory, Policy.CASCADE, field="product_id"),
    Rule(Product, ProductImage, Policy.CASCADE, collection="images"),
    Rule(Product, Review, Policy.CASCADE, field="product_id"),
    Rule(Product, OrderItem, Policy.RESTRICT, field="product_id"),
    Rule(Product, CartItem, Policy.RESTRICT, field="product_id"),
    Rule(Order, OrderItem, Policy.CASCADE, collection="items"),
    Rule(Order, Payment, Policy.CASCADE, field="order_id"),
    Rule(Supplier, ProductSupplier, Policy.CASCADE, field="supplier_id"),
    Rule(Cart, CartItem, Policy.CASCADE, collection="items"),
)


def rules_for(parent_cls, rules=RULES) -> list[Rule]:
    return [rule for rule in rules if rule.parent is parent_cls]
