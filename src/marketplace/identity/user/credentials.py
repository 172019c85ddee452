"""Credential workflows — the only place plaintext passwords are handled.

Commands are persisted as messages, so passwords are checked and hashed here
and only the resulting hash is handed to the domain.
"""

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from marketplace.identity.exceptions import EmailNotVerifiedError
from marketplace.identity.user.account import ChangePassword
from marketplace.identity.user.email import validate_email_address
from marketplace.identity.user.passwords import hash_password, validate_password_strength, verify_password
from marketplace.identity.user.registration import RegisterUser
from marketplace.identity.user.tokens import issue_access_token, issue_verification_token
from marketplace.identity.user.user import User

logger = structlog.get_logger(__name__)


def sign_up(email: str, password: str, confirm_password: str) -> dict:
    """Register a new account and return its id with the email-verification token."""
    validate_email_address(email)
    validate_password_strength(password)

    if not confirm_password:
        raise ValidationError({"confirm_password": ["Confirm Password is required"]})
    if password != confirm_password:
        raise ValidationError({"confirm_password": ["Passwords do not match"]})

    token = issue_verification_token(email)
    user_id = current_domain.process(
        RegisterUser(
            email=email,
            password_hash=hash_password(password),
            verification_token=token,
        ),
        asynchronous=False,
    )
    logger.info("User registered", user_id=user_id)
    return {"user_id": user_id, "token": token}


def log_in(email: str, password: str) -> dict:
    """Exchange valid credentials of a verified, active account for an access token."""
    validate_email_address(email)
    if not password:
        raise ValidationError({"password": ["Password is required"]})

    user = current_domain.repository_for(User).find_active_by_email(email)
    if user is None:
        raise ValidationError({"credentials": ["Invalid credentials"]})

    if not user.is_email_verified:
        raise EmailNotVerifiedError()

    if not verify_password(password, user.password_hash):
        logger.info("Login rejected", user_id=str(user.id), reason="password_mismatch")
        raise ValidationError({"credentials": ["Invalid credentials"]})

    return {
        "token": issue_access_token(str(user.id)),
        "user": {"name": user.display_name, "email": user.email},
    }


def change_password(user_id: str, current_password: str, new_password: str) -> None:
    if not current_password:
        raise ValidationError({"current_password": ["Current password is required"]})
    validate_password_strength(new_password, field="new_password")

    user = current_domain.repository_for(User).get_active(user_id)
    if not verify_password(current_password, user.password_hash):
        raise ValidationError({"current_password": ["Current password is incorrect"]})

    current_domain.process(
        ChangePassword(user_id=user_id, password_hash=hash_password(new_password)),
        asynchronous=False,
    )
