"""Checkout — converts the owner's cart into an order and discards the cart."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class PlaceOrder:
    owner_id = Identifier(required=True)
    total_amount = Float(required=True, min_value=0.0)
    idempotency_key = String(max_length=255)


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order_repo = current_domain.repository_for(Order)

        if command.idempotency_key:
            existing = order_repo.find_by_idempotency_key(command.owner_id, command.idempotency_key)
            if existing:
                logger.info("Order replayed", order_id=str(existing.id), idempotency_key=command.idempotency_key)
                return str(existing.id)

        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.find_for_owner(command.owner_id)
        if cart is None or not cart.items:
            raise ObjectNotFoundError({"cart": ["Cart is empty or not found"]})

        # The total is taken as supplied by the client
        order = Order.place(
            owner_id=command.owner_id,
            lines=cart.snapshot(),
            total_amount=command.total_amount,
            idempotency_key=command.idempotency_key,
        )
        order_repo.add(order)
        cart_repo.remove(cart)

        logger.info("Order placed", order_id=str(order.id), owner_id=str(command.owner_id))
        return str(order.id)
