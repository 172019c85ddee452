"""Repository for the Cart aggregate — carts are addressed by owner, not by id."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart


@marketplace.repository(part_of=Cart)
class CartRepository:
    def find_for_owner(self, owner_id: str) -> Cart | None:
        carts = self._dao.query.filter(owner_id=str(owner_id)).all().items
        return carts[0] if carts else None

    def get_for_owner(self, owner_id: str) -> Cart:
        cart = self.find_for_owner(owner_id)
        if cart is None:
            raise ObjectNotFoundError({"cart": ["Cart not found"]})
        return cart

    def get_or_create_for_owner(self, owner_id: str) -> Cart:
        """Upsert by owner: return the owner's cart, creating an empty one if absent.

        ``owner_id`` is declared unique on the aggregate, so a second cart for
        the same owner is rejected at save time rather than silently created.
        """
        cart = self.find_for_owner(owner_id)
        if cart is None:
            cart = Cart.create(owner_id=str(owner_id))
        return cart

    def remove(self, cart: Cart) -> None:
        self._dao.delete(cart)
