"""FastAPI endpoints for the catalogue: categories, suppliers, products."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddProductImageRequest,
    AdjustInventoryRequest,
    CreateCategoryRequest,
    CreateProductRequest,
    CreateSupplierRequest,
    IdResponse,
    LinkCategoryRequest,
    LinkSupplierRequest,
    MoveCategoryRequest,
    StatusResponse,
    UpdateProductPriceRequest,
)
from storefront.catalogue.associations import (
    AdjustInventory,
    LinkProductCategory,
    LinkProductSupplier,
    UnlinkProductCategory,
)
from storefront.catalogue.categories import CreateCategory, DeleteCategory, MoveCategory
from storefront.catalogue.products import AddProductImage, CreateProduct, DeleteProduct, UpdateProductPrice
from storefront.catalogue.suppliers import CreateSupplier, DeleteSupplier

category_router = APIRouter(prefix="/categories", tags=["categories"])
supplier_router = APIRouter(prefix="/suppliers", tags=["suppliers"])
product_router = APIRouter(prefix="/products", tags=["products"])


# --- Category endpoints ---


@category_router.post("", status_code=201, response_model=IdResponse)
async def create_category(body: CreateCategoryRequest) -> IdResponse:
    command = CreateCategory(**body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@category_router.put("/{category_id}/parent", response_model=StatusResponse)
async def move_category(category_id: str, body: MoveCategoryRequest) -> StatusResponse:
    current_domain.process(MoveCategory(category_id=category_id, parent_id=body.parent_id), asynchronous=False)
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


# --- Supplier endpoints ---


@supplier_router.post("", status_code=201, response_model=IdResponse)
async def create_supplier(body: CreateSupplierRequest) -> IdResponse:
    command = CreateSupplier(**body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@supplier_router.delete("/{supplier_id}", response_model=StatusResponse)
async def delete_supplier(supplier_id: str) -> StatusResponse:
    current_domain.process(DeleteSupplier(supplier_id=supplier_id), asynchronous=False)
    return StatusResponse()


# --- Product endpoints ---


@product_router.post("", status_code=201, response_model=IdResponse)
async def create_product(body: CreateProductRequest) -> IdResponse:
    command = CreateProduct(**body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@product_router.put("/{product_id}/price", response_model=StatusResponse)
async def update_product_price(product_id: str, body: UpdateProductPriceRequest) -> StatusResponse:
    current_domain.process(UpdateProductPrice(product_id=product_id, price=body.price), asynchronous=False)
    return StatusResponse()


@product_router.post("/{product_id}/images", status_code=201, response_model=IdResponse)
async def add_product_image(product_id: str, body: AddProductImageRequest) -> IdResponse:
    command = AddProductImage(product_id=product_id, **body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@product_router.post("/{product_id}/categories", status_code=201, response_model=IdResponse)
async def link_category(product_id: str, body: LinkCategoryRequest) -> IdResponse:
    command = LinkProductCategory(product_id=product_id, category_id=body.category_id)
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@product_router.delete("/{product_id}/categories/{category_id}", response_model=StatusResponse)
async def unlink_category(product_id: str, category_id: str) -> StatusResponse:
    current_domain.process(UnlinkProductCategory(product_id=product_id, category_id=category_id), asynchronous=False)
    return StatusResponse()


@product_router.post("/{product_id}/suppliers", status_code=201, response_model=IdResponse)
async def link_supplier(product_id: str, body: LinkSupplierRequest) -> IdResponse:
    command = LinkProductSupplier(product_id=product_id, **body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@product_router.put("/{product_id}/inventory", response_model=StatusResponse)
async def adjust_inventory(product_id: str, body: AdjustInventoryRequest) -> StatusResponse:
    current_domain.process(AdjustInventory(product_id=product_id, delta=body.delta), asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()
