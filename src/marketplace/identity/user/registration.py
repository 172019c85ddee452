"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.email import validate_email_address
from marketplace.identity.user.user import User


@marketplace.command(part_of="User")
class RegisterUser:
    """Create an unverified account. Carries the password hash, never the password."""

    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    verification_token: Text(required=True)


@marketplace.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        validate_email_address(command.email)

        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User already exists"]})

        user = User.register(
            email=command.email,
            password_hash=command.password_hash,
            verification_token=command.verification_token,
        )
        repo.add(user)
        return str(user.id)
