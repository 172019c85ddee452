"""Email verification — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.tokens import decode_verification_token
from marketplace.identity.user.user import User


@marketplace.command(part_of="User")
class VerifyEmail:
    token: Text(required=True)


@marketplace.command_handler(part_of=User)
class VerifyEmailHandler:
    @handle(VerifyEmail)
    def verify_email(self, command):
        email = decode_verification_token(command.token)

        repo = current_domain.repository_for(User)
        user = repo.find_by_email(email)
        if user is None:
            raise ValidationError({"token": ["User not found or invalid token"]})

        user.verify_email()
        repo.add(user)
        return str(user.id)
