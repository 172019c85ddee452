"""Pydantic response schemas for the Catalogue API.

Product writes arrive as multipart forms, so only responses and the JSON
stock-decrement body are modelled here.
"""

from datetime import datetime

from pydantic import Field

from marketplace.api.schemas import CamelModel


class DecrementStockRequest(CamelModel):
    order_quantity: int = Field(..., ge=1)


class ProductResponse(CamelModel):
    id: str
    seller_id: str
    first_name: str | None = None
    last_name: str | None = None
    business_name: str | None = None
    name: str
    quantity: int
    unit_price: float
    description: str | None = None
    category: str
    image: str | None = None
    uploaded_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            seller_id=str(product.seller_id),
            first_name=product.first_name,
            last_name=product.last_name,
            business_name=product.business_name,
            name=product.name,
            quantity=product.quantity,
            unit_price=product.unit_price,
            description=product.description,
            category=product.category,
            image=product.image,
            uploaded_at=product.uploaded_at,
        )
