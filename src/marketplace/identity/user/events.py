"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="User")
class UserRegistered:
    """A new account was created and is awaiting email verification."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    verification_token: Text(required=True)
    registered_at: DateTime(required=True)


@marketplace.event(part_of="User")
class EmailVerified:
    """The account holder confirmed ownership of the email address."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    verified_at: DateTime(required=True)


@marketplace.event(part_of="User")
class ProfileUpdated:
    """Personal or business details on the account were replaced."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    role: String(max_length=10)
    business_name: String(max_length=255)


@marketplace.event(part_of="User")
class PasswordChanged:
    """The account password was replaced."""

    __version__ = 1

    user_id: Identifier(required=True)
    changed_at: DateTime(required=True)


@marketplace.event(part_of="User")
class AccountDeleted:
    """The account was soft-deleted. There is no restore path."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    deleted_at: DateTime(required=True)
