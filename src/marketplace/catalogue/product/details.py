"""Product updates and removal — commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product, ProductCategory
from marketplace.domain import marketplace
from marketplace.identity.user.user import User


@marketplace.command(part_of="Product")
class UpdateProduct:
    """Partial update: fields left empty keep their current value."""

    product_id: Identifier(required=True)
    user_id: Identifier(required=True)
    name: String(max_length=255)
    quantity: Integer(min_value=0)
    unit_price: Float()
    description: Text()
    category: String(choices=ProductCategory)
    image: String(max_length=500)


@marketplace.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)
    user_id: Identifier(required=True)


def _load_for_seller(product_id, user_id):
    """Load a listed product on behalf of its seller."""
    current_domain.repository_for(User).get_active(user_id)

    product = current_domain.repository_for(Product).get_listed(product_id)
    if str(product.seller_id) != str(user_id):
        raise ValidationError({"product": ["Only the seller can modify this listing"]})
    return product


@marketplace.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        product = _load_for_seller(command.product_id, command.user_id)
        product.update_details(
            updated_by=command.user_id,
            name=command.name,
            quantity=command.quantity,
            unit_price=command.unit_price,
            description=command.description,
            category=command.category,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = _load_for_seller(command.product_id, command.user_id)
        product.soft_delete(deleted_by=command.user_id)
        current_domain.repository_for(Product).add(product)
