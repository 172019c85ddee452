"""Resolves line item product references to current catalogue data."""

from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product


def product_summary(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "unit_price": product.unit_price,
        "description": product.description,
        "category": product.category,
        "image": product.image,
        "business_name": product.business_name,
    }


def resolve_lines(items) -> list[dict]:
    """Attach the current product to each line and compute its total.

    Products that have been soft-deleted since the line was created resolve
    to ``None`` and contribute nothing to the total.
    """
    repo = current_domain.repository_for(Product)
    resolved = []
    for item in items:
        product = repo.find_listed(str(item.product_id))
        resolved.append(
            {
                "product_id": str(item.product_id),
                "quantity": item.quantity,
                "product": product_summary(product) if product else None,
                "line_total": round(item.quantity * product.unit_price, 2) if product else 0.0,
            }
        )
    return resolved
