"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Identity ---


class RegisterAccountRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "jane@example.com",
                    "password_hash": "$2b$12$abcdefghijklmnopqrstuv",
                    "first_name": "Jane",
                    "last_name": "Doe",
                }
            ]
        }
    }

    email: str = Field(..., max_length=255)
    password_hash: str = Field(..., max_length=255)
    role: str = Field("customer", max_length=20)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=30)
    date_of_birth: str | None = Field(None, max_length=10)


class AddAddressRequest(BaseModel):
    label: str | None = Field(None, max_length=50)
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str | None = Field(None, max_length=100)
    postal_code: str | None = Field(None, max_length=30)
    country: str = Field(..., max_length=100)
    is_default_shipping: bool = False
    is_default_billing: bool = False


# --- Catalogue ---


class CreateCategoryRequest(BaseModel):
    name: str = Field(..., max_length=150)
    slug: str | None = Field(None, max_length=200)
    parent_id: str | None = None


class MoveCategoryRequest(BaseModel):
    parent_id: str | None = None


class CreateSupplierRequest(BaseModel):
    name: str = Field(..., max_length=255)
    contact_email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=30)
    address: str | None = None


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "sku": "KB-MECH-01",
                    "name": "Mechanical Keyboard",
                    "price": 89.99,
                    "weight_kg": 1.1,
                    "initial_quantity": 25,
                }
            ]
        }
    }

    sku: str = Field(..., max_length=64)
    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float
    weight_kg: float | None = None
    initial_quantity: int = 0
    re_order_level: int = 10
    is_backorder_allowed: bool = False


class UpdateProductPriceRequest(BaseModel):
    price: float


class AddProductImageRequest(BaseModel):
    url: str = Field(..., max_length=1024)
    alt_text: str | None = Field(None, max_length=255)
    is_primary: bool = False


class LinkCategoryRequest(BaseModel):
    category_id: str


class LinkSupplierRequest(BaseModel):
    supplier_id: str
    supplier_sku: str | None = Field(None, max_length=128)
    cost_price: float | None = None


class AdjustInventoryRequest(BaseModel):
    delta: int


# --- Ordering ---


class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "c1d2e3f4-0000-0000-0000-000000000001",
                    "items": [{"product_id": "p1d2e3f4-0000-0000-0000-000000000001", "quantity": 2}],
                    "subtotal": 309.98,
                    "shipping": 5.00,
                    "tax": 15.50,
                }
            ]
        }
    }

    customer_id: str
    items: list[OrderLineRequest] = Field(default_factory=list)
    order_number: str | None = Field(None, max_length=50)
    shipping_address_id: str | None = None
    billing_address_id: str | None = None
    subtotal: float | None = None
    shipping: float | None = None
    tax: float | None = None
    total: float | None = None


class AddOrderItemRequest(BaseModel):
    product_id: str
    quantity: int


class UpdateOrderAmountsRequest(BaseModel):
    subtotal: float | None = None
    shipping: float | None = None
    tax: float | None = None


class ChangeOrderStatusRequest(BaseModel):
    status: str = Field(..., max_length=20)


class CreateCartRequest(BaseModel):
    customer_id: str


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = 1


class UpdateCartQuantityRequest(BaseModel):
    quantity: int


class RecordPaymentRequest(BaseModel):
    order_id: str
    payment_method: str = Field(..., max_length=20)
    paid_amount: float
    transaction_reference: str | None = Field(None, max_length=255)
    payment_status: str | None = Field(None, max_length=20)


class UpdatePaymentStatusRequest(BaseModel):
    payment_status: str = Field(..., max_length=20)


class SubmitReviewRequest(BaseModel):
    product_id: str
    customer_id: str
    rating: int
    title: str | None = Field(None, max_length=255)
    body: str | None = None


# --- Responses ---


class IdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    sku_snapshot: str
    name_snapshot: str
    unit_price: float
    quantity: int
    line_total: float


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    order_number: str
    status: str
    shipping_address_id: str | None = None
    billing_address_id: str | None = None
    subtotal: float
    shipping: float
    tax: float
    total: float
    items: list[OrderItemResponse] = Field(default_factory=list)


class OrderSummaryRow(BaseModel):
    order_id: str
    order_number: str
    customer_id: str
    order_date: datetime | None = None
    status: str
    total: float
    payment_status: str
