"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductAdded:
    """A seller listed a new product."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    quantity: Integer(required=True)
    unit_price: Float(required=True)
    category: String(required=True, max_length=50)
    added_at: DateTime(required=True)


@marketplace.event(part_of="Product")
class ProductUpdated:
    """Listing details changed in place."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    updated_by: Identifier(required=True)


@marketplace.event(part_of="Product")
class ProductDeleted:
    """The listing was soft-deleted and no longer appears anywhere."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    deleted_by: Identifier(required=True)


@marketplace.event(part_of="Product")
class StockDecremented:
    """Available quantity was reduced to cover an order."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity_ordered: Integer(required=True)
    remaining_quantity: Integer(required=True)
