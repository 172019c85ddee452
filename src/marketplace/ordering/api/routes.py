"""FastAPI endpoints for the cart and orders."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.api.auth import current_active_user_id
from marketplace.ordering.api.schemas import (
    AddToCartRequest,
    CartResponse,
    OrderResponse,
    PlaceOrderRequest,
)
from marketplace.ordering.cart.items import AddToCart, RemoveFromCart
from marketplace.ordering.cart.view import get_cart_view
from marketplace.ordering.order.history import get_order_view, list_orders
from marketplace.ordering.order.placement import PlaceOrder

cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/order", tags=["orders"])


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.post("", response_model=CartResponse)
async def add_to_cart(body: AddToCartRequest, user_id: str = Depends(current_active_user_id)) -> CartResponse:
    command = AddToCart(owner_id=user_id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return CartResponse(**get_cart_view(user_id))


@cart_router.get("", response_model=CartResponse)
async def get_cart(user_id: str = Depends(current_active_user_id)) -> CartResponse:
    return CartResponse(**get_cart_view(user_id))


@cart_router.delete("/{product_id}", response_model=CartResponse)
async def remove_from_cart(product_id: str, user_id: str = Depends(current_active_user_id)) -> CartResponse:
    current_domain.process(RemoveFromCart(owner_id=user_id, product_id=product_id), asynchronous=False)
    return CartResponse(**get_cart_view(user_id))


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.post("/order", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, user_id: str = Depends(current_active_user_id)) -> OrderResponse:
    command = PlaceOrder(
        owner_id=user_id,
        total_amount=body.total_amount,
        idempotency_key=body.idempotency_key,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse(**get_order_view(order_id))


@order_router.get("/orders", response_model=list[OrderResponse])
async def get_orders(user_id: str = Depends(current_active_user_id)) -> list[OrderResponse]:
    return [OrderResponse(**order) for order in list_orders(user_id)]
