"""FastAPI endpoints for orders, carts, payments and reviews."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddOrderItemRequest,
    AddToCartRequest,
    ChangeOrderStatusRequest,
    CreateCartRequest,
    IdResponse,
    OrderItemResponse,
    OrderResponse,
    OrderSummaryRow,
    PlaceOrderRequest,
    RecordPaymentRequest,
    StatusResponse,
    SubmitReviewRequest,
    UpdateCartQuantityRequest,
    UpdateOrderAmountsRequest,
    UpdatePaymentStatusRequest,
)
from storefront.ordering.carts import AddToCart, CreateCart, DeleteCart, RemoveFromCart, UpdateCartQuantity
from storefront.ordering.creation import PlaceOrder
from storefront.ordering.modification import AddOrderItem, ChangeOrderStatus, UpdateOrderAmounts
from storefront.ordering.order import Order
from storefront.ordering.removal import DeleteOrder
from storefront.ordering.summary import order_summaries
from storefront.payments.recording import RecordPayment, UpdatePaymentStatus
from storefront.reviews.submission import DeleteReview, SubmitReview

order_router = APIRouter(prefix="/orders", tags=["orders"])
cart_router = APIRouter(prefix="/carts", tags=["carts"])
payment_router = APIRouter(prefix="/payments", tags=["payments"])
review_router = APIRouter(prefix="/reviews", tags=["reviews"])


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        customer_id=str(order.customer_id),
        order_number=order.order_number,
        status=order.status,
        shipping_address_id=str(order.shipping_address_id) if order.shipping_address_id else None,
        billing_address_id=str(order.billing_address_id) if order.billing_address_id else None,
        subtotal=order.subtotal,
        shipping=order.shipping,
        tax=order.tax,
        total=order.total,
        items=[
            OrderItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                sku_snapshot=item.sku_snapshot,
                name_snapshot=item.name_snapshot,
                unit_price=item.unit_price,
                quantity=item.quantity,
                line_total=item.line_total,
            )
            for item in order.items
        ],
    )


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=IdResponse)
async def place_order(body: PlaceOrderRequest) -> IdResponse:
    data = body.model_dump(exclude={"items"})
    command = PlaceOrder(
        items=json.dumps([item.model_dump() for item in body.items]),
        **{key: value for key, value in data.items() if value is not None},
    )
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@order_router.get("/summary", response_model=list[OrderSummaryRow])
async def order_summary(customer_id: str | None = None) -> list[OrderSummaryRow]:
    return [OrderSummaryRow(**row) for row in order_summaries(customer_id=customer_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.post("/{order_id}/items", status_code=201, response_model=IdResponse)
async def add_order_item(order_id: str, body: AddOrderItemRequest) -> IdResponse:
    command = AddOrderItem(order_id=order_id, product_id=body.product_id, quantity=body.quantity)
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@order_router.put("/{order_id}/amounts", response_model=OrderResponse)
async def update_order_amounts(order_id: str, body: UpdateOrderAmountsRequest) -> OrderResponse:
    command = UpdateOrderAmounts(order_id=order_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def change_order_status(order_id: str, body: ChangeOrderStatusRequest) -> StatusResponse:
    current_domain.process(ChangeOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return StatusResponse()


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()


# --- Cart endpoints ---


@cart_router.post("", status_code=201, response_model=IdResponse)
async def create_cart(body: CreateCartRequest) -> IdResponse:
    return IdResponse(id=current_domain.process(CreateCart(customer_id=body.customer_id), asynchronous=False))


@cart_router.post("/{cart_id}/items", status_code=201, response_model=IdResponse)
async def add_to_cart(cart_id: str, body: AddToCartRequest) -> IdResponse:
    command = AddToCart(cart_id=cart_id, product_id=body.product_id, quantity=body.quantity)
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@cart_router.put("/{cart_id}/items/{product_id}", response_model=StatusResponse)
async def update_cart_quantity(cart_id: str, product_id: str, body: UpdateCartQuantityRequest) -> StatusResponse:
    command = UpdateCartQuantity(cart_id=cart_id, product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items/{product_id}", response_model=StatusResponse)
async def remove_from_cart(cart_id: str, product_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(cart_id=cart_id, product_id=product_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}", response_model=StatusResponse)
async def delete_cart(cart_id: str) -> StatusResponse:
    current_domain.process(DeleteCart(cart_id=cart_id), asynchronous=False)
    return StatusResponse()


# --- Payment endpoints ---


@payment_router.post("", status_code=201, response_model=IdResponse)
async def record_payment(body: RecordPaymentRequest) -> IdResponse:
    command = RecordPayment(**body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@payment_router.put("/{payment_id}/status", response_model=StatusResponse)
async def update_payment_status(payment_id: str, body: UpdatePaymentStatusRequest) -> StatusResponse:
    command = UpdatePaymentStatus(payment_id=payment_id, payment_status=body.payment_status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# --- Review endpoints ---


@review_router.post("", status_code=201, response_model=IdResponse)
async def submit_review(body: SubmitReviewRequest) -> IdResponse:
    command = SubmitReview(**body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@review_router.delete("/{review_id}", response_model=StatusResponse)
async def delete_review(review_id: str) -> StatusResponse:
    current_domain.process(DeleteReview(review_id=review_id), asynchronous=False)
    return StatusResponse()
