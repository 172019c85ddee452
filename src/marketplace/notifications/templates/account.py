"""Account lifecycle email templates."""

from marketplace import settings
from marketplace.notifications.types import NotificationType


class EmailVerificationTemplate:
    """Carries the link the user follows to confirm their address."""

    notification_type = NotificationType.EMAIL_VERIFICATION.value

    @staticmethod
    def render(context: dict) -> dict:
        verification_url = f"{settings.FRONTEND_URL}/auth/verify-email?token={context['token']}"
        return {
            "subject": "Email Verification",
            "body": f"Please verify your email by clicking this link: {verification_url}",
        }


class RegistrationTemplate:
    notification_type = NotificationType.REGISTRATION.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Registration Successful",
            "body": f"Thank you for registering, {context['email']}. Please verify your email.",
        }


class EmailVerifiedTemplate:
    notification_type = NotificationType.EMAIL_VERIFIED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Email Verified",
            "body": f"Hi {context['email']}, your email address has been verified. You can now log in.",
        }


class ProfileUpdatedTemplate:
    notification_type = NotificationType.PROFILE_UPDATED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "User Info Updated",
            "body": "Your user information has been successfully updated.",
        }


class AccountDeletedTemplate:
    notification_type = NotificationType.ACCOUNT_DELETED.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "subject": "Account Deletion",
            "body": (
                f"Dear {context['email']}, your account has been successfully deleted. "
                "If this was not intended, please contact support."
            ),
        }
