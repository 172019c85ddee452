"""Product creation — command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product, ProductCategory
from marketplace.domain import marketplace
from marketplace.identity.user.user import User


@marketplace.command(part_of="Product")
class AddProduct:
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    quantity: Integer(required=True, min_value=0)
    unit_price: Float(required=True)
    description: Text()
    category: String(required=True, choices=ProductCategory)
    image: String(max_length=500)


@marketplace.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        seller = current_domain.repository_for(User).get_active(command.seller_id)

        product = Product.add(
            seller=seller,
            name=command.name,
            quantity=command.quantity,
            unit_price=command.unit_price,
            category=command.category,
            description=command.description,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
