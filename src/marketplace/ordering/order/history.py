"""Order history for a user, with line items resolved against the live catalogue."""

from protean.utils.globals import current_domain

from marketplace.ordering.lines import resolve_lines
from marketplace.ordering.order.order import Order


def order_view(order: Order) -> dict:
    return {
        "id": str(order.id),
        "owner_id": str(order.owner_id),
        "items": resolve_lines(order.items),
        "total_amount": order.total_amount,
        "payment_status": order.payment_status,
        "order_status": order.order_status,
        "idempotency_key": order.idempotency_key,
        "created_at": order.created_at,
    }


def get_order_view(order_id: str) -> dict:
    return order_view(current_domain.repository_for(Order).get(order_id))


def list_orders(owner_id: str) -> list[dict]:
    """Every order the user has placed, oldest first. No orders is reported as not found."""
    orders = current_domain.repository_for(Order).list_for_owner(owner_id)
    return [order_view(order) for order in orders]
