"""Listing emails to sellers — reacts to Product events."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.catalogue.product.events import ProductAdded, ProductDeleted, ProductUpdated
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.identity.user.user import User
from marketplace.notifications.dispatch import send_email
from marketplace.notifications.types import NotificationType

logger = structlog.get_logger(__name__)


def _notify_seller(seller_id: str, notification_type: str, product_name: str) -> None:
    try:
        seller = current_domain.repository_for(User).get(seller_id)
    except ObjectNotFoundError:
        logger.warning("Seller not found for listing email", seller_id=seller_id)
        return

    send_email(seller.email, notification_type, {"product_name": product_name})


@marketplace.event_handler(part_of=Product)
class ListingEmailsHandler:
    @handle(ProductAdded)
    def on_product_added(self, event: ProductAdded) -> None:
        _notify_seller(str(event.seller_id), NotificationType.PRODUCT_ADDED.value, event.name)

    @handle(ProductUpdated)
    def on_product_updated(self, event: ProductUpdated) -> None:
        _notify_seller(str(event.seller_id), NotificationType.PRODUCT_UPDATED.value, event.name)

    @handle(ProductDeleted)
    def on_product_deleted(self, event: ProductDeleted) -> None:
        _notify_seller(str(event.seller_id), NotificationType.PRODUCT_DELETED.value, event.name)
