"""Account emails — reacts to User events."""

from protean.utils.mixins import handle

from marketplace.domain import marketplace
from marketplace.identity.user.events import (
    AccountDeleted,
    EmailVerified,
    ProfileUpdated,
    UserRegistered,
)
from marketplace.identity.user.user import User
from marketplace.notifications.dispatch import send_email
from marketplace.notifications.types import NotificationType


@marketplace.event_handler(part_of=User)
class AccountEmailsHandler:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        """Send the verification link, then the registration confirmation."""
        send_email(
            event.email,
            NotificationType.EMAIL_VERIFICATION.value,
            {"token": event.verification_token},
        )
        send_email(event.email, NotificationType.REGISTRATION.value, {"email": event.email})

    @handle(EmailVerified)
    def on_email_verified(self, event: EmailVerified) -> None:
        send_email(event.email, NotificationType.EMAIL_VERIFIED.value, {"email": event.email})

    @handle(ProfileUpdated)
    def on_profile_updated(self, event: ProfileUpdated) -> None:
        send_email(event.email, NotificationType.PROFILE_UPDATED.value, {"email": event.email})

    @handle(AccountDeleted)
    def on_account_deleted(self, event: AccountDeleted) -> None:
        send_email(event.email, NotificationType.ACCOUNT_DELETED.value, {"email": event.email})
