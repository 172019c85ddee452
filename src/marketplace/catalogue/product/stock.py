"""Stock decrement on order — command and handler.

Placing an order does not touch stock. Callers invoke this separately for each
product they want to draw down.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace


@marketplace.command(part_of="Product")
class DecrementStock:
    product_id: Identifier(required=True)
    order_quantity: Integer(required=True, min_value=1)


@marketplace.command_handler(part_of=Product)
class DecrementStockHandler:
    @handle(DecrementStock)
    def decrement_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_listed(command.product_id)
        product.decrement_for_order(command.order_quantity)
        repo.add(product)
        return product.quantity
