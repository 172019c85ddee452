"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace


def _matches(value, needle):
    return bool(needle) and needle.lower() in (value or "").lower()


@marketplace.repository(part_of=Product)
class ProductRepository:
    """Read paths only ever see listed (not soft-deleted) products."""

    def get_listed(self, product_id: str) -> Product:
        product = self.get(product_id)
        if product.is_deleted:
            raise ObjectNotFoundError({"product": ["Product not found"]})
        return product

    def find_listed(self, product_id: str) -> Product | None:
        try:
            return self.get_listed(product_id)
        except ObjectNotFoundError:
            return None

    def list_listed(self) -> list[Product]:
        return self._dao.query.filter(is_deleted=False).all().items

    def search(self, category: str | None = None, name: str | None = None, business_name: str | None = None):
        """Case-insensitive substring search; a product matches if any given criterion matches.

        With no criteria at all every listed product is returned.
        """
        products = self.list_listed()
        if not (category or name or business_name):
            return products

        return [
            product
            for product in products
            if _matches(product.category, category)
            or _matches(product.name, name)
            or _matches(product.business_name, business_name)
        ]
