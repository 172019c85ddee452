"""Seller-facing listing email templates."""

from marketplace.notifications.types import NotificationType


class ProductAddedTemplate:
    notification_type = NotificationType.PRODUCT_ADDED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Product Added Successfully",
            "body": f"Product {context['product_name']} has been added successfully.",
        }


class ProductUpdatedTemplate:
    notification_type = NotificationType.PRODUCT_UPDATED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Product Updated",
            "body": f"Product {context['product_name']} has been updated.",
        }


class ProductDeletedTemplate:
    notification_type = NotificationType.PRODUCT_DELETED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Product Deleted",
            "body": f"Product {context['product_name']} has been deleted.",
        }
