"""Order aggregate — an immutable snapshot of a cart at checkout time.

Line items are copied from the cart when the order is placed. Catalogue
changes made afterwards never touch them; views resolve the referenced
products to their current data when orders are read.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from marketplace.domain import marketplace
from marketplace.ordering.order.events import OrderPlaced


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class PaymentStatus(Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"


class OrderStatus(Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@marketplace.entity(part_of="Order")
class OrderLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@marketplace.aggregate
class Order:
    owner_id = Identifier(required=True)
    items = HasMany(OrderLine)
    total_amount = Float(required=True, min_value=0.0)
    payment_status = String(
        max_length=20,
        choices=PaymentStatus,
        default=PaymentStatus.PENDING.value,
    )
    order_status = String(
        max_length=20,
        choices=OrderStatus,
        default=OrderStatus.PROCESSING.value,
    )
    idempotency_key = String(max_length=255)
    created_at = DateTime()

    @classmethod
    def place(cls, owner_id, lines, total_amount, idempotency_key=None):
        """Create an order from a snapshot of cart lines (``[{product_id, quantity}]``)."""
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            owner_id=owner_id,
            total_amount=total_amount,
            idempotency_key=idempotency_key,
            created_at=now,
        )
        for line in lines:
            order.add_items(OrderLine(product_id=line["product_id"], quantity=line["quantity"]))

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                owner_id=str(owner_id),
                item_count=len(lines),
                total_amount=total_amount,
                placed_at=now,
            )
        )
        return order
