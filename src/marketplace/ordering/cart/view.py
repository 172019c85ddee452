"""Read side of the cart: prices are looked up on every read, never stored."""

from protean.utils.globals import current_domain

from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.lines import resolve_lines


def cart_view(cart: Cart) -> dict:
    items = resolve_lines(cart.items)
    return {
        "id": str(cart.id),
        "owner_id": str(cart.owner_id),
        "items": items,
        "total": round(sum(line["line_total"] for line in items), 2),
        "created_at": cart.created_at,
    }


def get_cart_view(owner_id: str) -> dict:
    cart = current_domain.repository_for(Cart).get_for_owner(owner_id)
    return cart_view(cart)
