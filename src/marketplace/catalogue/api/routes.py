"""FastAPI endpoints for product listings."""

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from protean.utils.globals import current_domain

from marketplace.api.auth import current_active_user_id
from marketplace.api.schemas import MessageResponse
from marketplace.catalogue.api.schemas import DecrementStockRequest, ProductResponse
from marketplace.catalogue.api.uploads import discard_image, save_image
from marketplace.catalogue.product.creation import AddProduct
from marketplace.catalogue.product.details import DeleteProduct, UpdateProduct
from marketplace.catalogue.product.product import Product
from marketplace.catalogue.product.stock import DecrementStock

router = APIRouter(prefix="/products", tags=["products"])


def _repo():
    return current_domain.repository_for(Product)


@router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [ProductResponse.from_product(p) for p in _repo().list_listed()]


# Declared before the ``/{product_id}`` routes so "search" is never read as an id
@router.get("/search", response_model=list[ProductResponse])
async def search_products(
    category: str | None = Query(None),
    name: str | None = Query(None),
    business_name: str | None = Query(None, alias="businessName"),
) -> list[ProductResponse]:
    products = _repo().search(category=category, name=name, business_name=business_name)
    return [ProductResponse.from_product(p) for p in products]


@router.post("", status_code=201, response_model=ProductResponse)
async def add_product(
    name: str = Form(...),
    quantity: int = Form(...),
    unit_price: float = Form(..., alias="unitPrice"),
    category: str = Form(...),
    description: str | None = Form(None),
    image: UploadFile | None = File(None),
    user_id: str = Depends(current_active_user_id),
) -> ProductResponse:
    image_path = await save_image(image)
    try:
        command = AddProduct(
            seller_id=user_id,
            name=name,
            quantity=quantity,
            unit_price=unit_price,
            description=description,
            category=category,
            image=image_path,
        )
        product_id = current_domain.process(command, asynchronous=False)
    except Exception:
        discard_image(image_path)
        raise
    return ProductResponse.from_product(_repo().get(product_id))


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    name: str | None = Form(None),
    quantity: int | None = Form(None),
    unit_price: float | None = Form(None, alias="unitPrice"),
    category: str | None = Form(None),
    description: str | None = Form(None),
    image: UploadFile | None = File(None),
    user_id: str = Depends(current_active_user_id),
) -> ProductResponse:
    image_path = await save_image(image)
    try:
        command = UpdateProduct(
            product_id=product_id,
            user_id=user_id,
            name=name,
            quantity=quantity,
            unit_price=unit_price,
            description=description,
            category=category,
            image=image_path,
        )
        current_domain.process(command, asynchronous=False)
    except Exception:
        discard_image(image_path)
        raise
    return ProductResponse.from_product(_repo().get(product_id))


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, user_id: str = Depends(current_active_user_id)) -> MessageResponse:
    current_domain.process(DeleteProduct(product_id=product_id, user_id=user_id), asynchronous=False)
    return MessageResponse(msg="Product deleted successfully")


@router.post("/{product_id}/order", response_model=ProductResponse)
async def decrement_stock(
    product_id: str,
    body: DecrementStockRequest,
    user_id: str = Depends(current_active_user_id),
) -> ProductResponse:
    current_domain.process(
        DecrementStock(product_id=product_id, order_quantity=body.order_quantity),
        asynchronous=False,
    )
    return ProductResponse.from_product(_repo().get(product_id))
