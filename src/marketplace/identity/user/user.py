"""User aggregate root — credentials, profile, verification state and soft delete."""

from datetime import datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from marketplace.domain import marketplace


class Role(Enum):
    """What the account does on the marketplace."""

    BUYER = "buyer"
    SELLER = "seller"
    BOTH = "both"


SELLING_ROLES = frozenset({Role.SELLER.value, Role.BOTH.value})


@marketplace.aggregate
class User:
    """A registered account holder, buyer, seller, or both.

    Accounts start unverified; logging in requires a verified email address.
    Deletion is a soft delete: the record stays, flagged, and is excluded from
    every read path.
    """

    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    contact_number: String(max_length=30)
    address: String(max_length=500)
    role: String(choices=Role)
    business_name: String(max_length=255)
    is_email_verified: Boolean(default=False)
    email_verification_token: Text()
    is_deleted: Boolean(default=False)
    registered_at: DateTime(default=datetime.now)

    @invariant.post
    def sellers_must_have_a_business_name(self):
        if self.role in SELLING_ROLES and not self.business_name:
            raise ValidationError({"business_name": ["Business name is required for sellers"]})

    @classmethod
    def register(cls, email, password_hash, verification_token):
        from marketplace.identity.user.events import UserRegistered

        now = datetime.now()
        user = cls(
            email=email,
            password_hash=password_hash,
            email_verification_token=verification_token,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=email,
                verification_token=verification_token,
                registered_at=now,
            )
        )
        return user

    @property
    def display_name(self):
        full_name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full_name or self.email

    def verify_email(self):
        from marketplace.identity.user.events import EmailVerified

        if self.is_email_verified:
            raise ValidationError({"token": ["Email already verified"]})

        self.is_email_verified = True
        self.email_verification_token = None
        self.raise_(
            EmailVerified(
                user_id=self.id,
                email=self.email,
                verified_at=datetime.now(),
            )
        )

    def change_password(self, password_hash):
        from marketplace.identity.user.events import PasswordChanged

        self.password_hash = password_hash
        self.raise_(PasswordChanged(user_id=self.id, changed_at=datetime.now()))

    def update_profile(self, first_name, last_name, contact_number, address, role, business_name=None):
        from marketplace.identity.user.events import ProfileUpdated

        # Buyers never carry a business name
        business_name = business_name if role in SELLING_ROLES else None

        with atomic_change(self):
            self.first_name = first_name
            self.last_name = last_name
            self.contact_number = contact_number
            self.address = address
            self.role = role
            self.business_name = business_name

        self.raise_(
            ProfileUpdated(
                user_id=self.id,
                email=self.email,
                role=role,
                business_name=business_name,
            )
        )

    def soft_delete(self):
        from marketplace.identity.user.events import AccountDeleted

        if self.is_deleted:
            raise ValidationError({"user": ["Account is already deleted"]})

        self.is_deleted = True
        self.raise_(
            AccountDeleted(
                user_id=self.id,
                email=self.email,
                deleted_at=datetime.now(),
            )
        )
