"""Template registry — maps NotificationType to template classes.

Each template renders a subject and a plain-text body from event context.
"""

from marketplace.notifications.templates.account import (
    AccountDeletedTemplate,
    EmailVerificationTemplate,
    EmailVerifiedTemplate,
    ProfileUpdatedTemplate,
    RegistrationTemplate,
)
from marketplace.notifications.templates.listings import (
    ProductAddedTemplate,
    ProductDeletedTemplate,
    ProductUpdatedTemplate,
)
from marketplace.notifications.types import NotificationType

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.EMAIL_VERIFICATION.value: EmailVerificationTemplate,
    NotificationType.REGISTRATION.value: RegistrationTemplate,
    NotificationType.EMAIL_VERIFIED.value: EmailVerifiedTemplate,
    NotificationType.PROFILE_UPDATED.value: ProfileUpdatedTemplate,
    NotificationType.ACCOUNT_DELETED.value: AccountDeletedTemplate,
    NotificationType.PRODUCT_ADDED.value: ProductAddedTemplate,
    NotificationType.PRODUCT_UPDATED.value: ProductUpdatedTemplate,
    NotificationType.PRODUCT_DELETED.value: ProductDeletedTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
