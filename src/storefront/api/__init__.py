"""Storefront API package."""

from storefront.api.catalogue import category_router, product_router, supplier_router
from storefront.api.errors import register_exception_handlers
from storefront.api.identity import account_router, customer_router
from storefront.api.ordering import cart_router, order_router, payment_router, review_router

routers = (
    account_router,
    customer_router,
    category_router,
    supplier_router,
    product_router,
    order_router,
    cart_router,
    payment_router,
    review_router,
)

__all__ = ["routers", "register_exception_handlers"]
