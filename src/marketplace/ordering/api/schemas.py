"""Pydantic request/response schemas for the cart and order API."""

from datetime import datetime

from pydantic import Field

from marketplace.api.schemas import CamelModel


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"productId": "prod-001", "quantity": 2}]}}

    product_id: str
    quantity: int = Field(..., ge=1)


class PlaceOrderRequest(CamelModel):
    model_config = {
        "json_schema_extra": {"examples": [{"totalAmount": 99.99, "idempotencyKey": "checkout-7f3a"}]}
    }

    total_amount: float = Field(..., ge=0)
    idempotency_key: str | None = Field(None, max_length=255)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class ProductSummary(CamelModel):
    id: str
    name: str
    unit_price: float
    description: str | None = None
    category: str | None = None
    image: str | None = None
    business_name: str | None = None


class LineResponse(CamelModel):
    product_id: str
    quantity: int
    product: ProductSummary | None = None
    line_total: float = 0.0


class CartResponse(CamelModel):
    id: str
    owner_id: str
    items: list[LineResponse] = []
    total: float = 0.0
    created_at: datetime | None = None


class OrderResponse(CamelModel):
    id: str
    owner_id: str
    items: list[LineResponse] = []
    total_amount: float
    payment_status: str
    order_status: str
    idempotency_key: str | None = None
    created_at: datetime | None = None
