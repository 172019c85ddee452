"""Shopping Cart aggregate — one per user, ephemeral, converted wholesale into an Order.

The cart holds product references and quantities only. Prices are never
stored on the cart; views resolve them from the catalogue at read time.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from marketplace.domain import marketplace
from marketplace.ordering.cart.events import CartItemAdded, CartItemRemoved


@marketplace.entity(part_of="Cart")
class LineItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@marketplace.aggregate
class Cart:
    owner_id = Identifier(required=True, unique=True)
    items = HasMany(LineItem)
    created_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, owner_id):
        return cls(owner_id=owner_id, created_at=datetime.now(UTC))

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def line_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product_id, quantity):
        """Add a product, or increase its quantity if the cart already holds it."""
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        existing = self.line_for(product_id)
        if existing:
            existing.quantity += quantity
            new_quantity = existing.quantity
        else:
            self.add_items(LineItem(product_id=product_id, quantity=quantity))
            new_quantity = quantity

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                owner_id=str(self.owner_id),
                product_id=str(product_id),
                quantity_added=quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        """Drop the product's line item. Removing a product the cart doesn't hold is a no-op."""
        existing = self.line_for(product_id)
        if existing is None:
            return False

        self.remove_items(existing)
        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                owner_id=str(self.owner_id),
                product_id=str(product_id),
            )
        )
        return True

    def snapshot(self):
        """Point-in-time copy of the line items, in cart order."""
        return [{"product_id": str(item.product_id), "quantity": item.quantity} for item in self.items]
