"""Repository for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order


@marketplace.repository(part_of=Order)
class OrderRepository:
    def for_owner(self, owner_id: str) -> list[Order]:
        return self._dao.query.filter(owner_id=str(owner_id)).order_by("created_at").all().items

    def list_for_owner(self, owner_id: str) -> list[Order]:
        orders = self.for_owner(owner_id)
        if not orders:
            raise ObjectNotFoundError({"orders": ["No orders found"]})
        return orders

    def find_by_idempotency_key(self, owner_id: str, key: str) -> Order | None:
        orders = self._dao.query.filter(owner_id=str(owner_id), idempotency_key=key).all().items
        return orders[0] if orders else None
