"""Product aggregate root — a seller's listing with stock and soft delete."""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class ProductCategory(Enum):
    """Fixed set of listing categories."""

    GULAY = "gulay"
    PRUTAS = "prutas"
    DAIRY_AND_EGGS = "dairy & eggs"
    HERBS_AND_SPICES = "herbs & spices"
    ORGANIC_SNACKS = "organic snacks"
    MEAT = "meat"
    FISH = "fish"
    CLOTHES = "clothes"
    HOUSEHOLD_ITEMS = "household items"


class InsufficientQuantityError(ValidationError):
    """Requested quantity exceeds the stock on hand."""


@marketplace.aggregate
class Product:
    """A listing owned by exactly one seller.

    The seller's names are copied onto the listing when it is created so that
    search by business name does not have to join against users.
    """

    seller_id: Identifier(required=True)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    business_name: String(max_length=255)
    name: String(required=True, max_length=255)
    quantity: Integer(required=True, min_value=0)
    unit_price: Float(required=True)
    description: Text()
    category: String(required=True, choices=ProductCategory)
    image: String(max_length=500)
    is_deleted: Boolean(default=False)
    uploaded_at: DateTime(default=datetime.now)

    @invariant.post
    def unit_price_must_be_positive(self):
        if self.unit_price is not None and self.unit_price <= 0:
            raise ValidationError({"unit_price": ["Unit price must be greater than zero"]})

    @classmethod
    def add(
        cls,
        seller,
        name,
        quantity,
        unit_price,
        category,
        description=None,
        image=None,
    ):
        from marketplace.catalogue.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            seller_id=seller.id,
            first_name=seller.first_name,
            last_name=seller.last_name,
            business_name=seller.business_name,
            name=name,
            quantity=quantity,
            unit_price=unit_price,
            description=description,
            category=category,
            image=image,
            uploaded_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                seller_id=str(seller.id),
                name=name,
                quantity=quantity,
                unit_price=unit_price,
                category=category,
                added_at=now,
            )
        )
        return product

    def _assert_listed(self):
        if self.is_deleted:
            raise ValidationError({"product": ["Product has been deleted"]})

    def update_details(
        self,
        updated_by,
        name=_UNSET,
        quantity=_UNSET,
        unit_price=_UNSET,
        description=_UNSET,
        category=_UNSET,
        image=_UNSET,
    ):
        """Replace the fields that were provided; everything else keeps its value."""
        from marketplace.catalogue.product.events import ProductUpdated

        self._assert_listed()

        changes = {
            "name": name,
            "quantity": quantity,
            "unit_price": unit_price,
            "description": description,
            "category": category,
            "image": image,
        }
        for field_name, value in changes.items():
            if value is not _UNSET and value is not None:
                setattr(self, field_name, value)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                seller_id=str(self.seller_id),
                name=self.name,
                updated_by=str(updated_by),
            )
        )

    def soft_delete(self, deleted_by):
        from marketplace.catalogue.product.events import ProductDeleted

        self._assert_listed()

        self.is_deleted = True
        self.raise_(
            ProductDeleted(
                product_id=self.id,
                seller_id=str(self.seller_id),
                name=self.name,
                deleted_by=str(deleted_by),
            )
        )

    def decrement_for_order(self, order_quantity):
        """Take ``order_quantity`` units out of stock. Stock never goes below zero."""
        from marketplace.catalogue.product.events import StockDecremented

        self._assert_listed()

        if order_quantity is None or order_quantity < 1:
            raise ValidationError({"order_quantity": ["Order quantity must be at least 1"]})

        if self.quantity < order_quantity:
            raise InsufficientQuantityError({"quantity": ["Insufficient quantity"]})

        self.quantity -= order_quantity
        self.raise_(
            StockDecremented(
                product_id=self.id,
                quantity_ordered=order_quantity,
                remaining_quantity=self.quantity,
            )
        )
