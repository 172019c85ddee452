"""User profile — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.user import Role, User


@marketplace.command(part_of="User")
class UpdateProfile:
    user_id: Identifier(required=True)
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    contact_number: String(required=True, max_length=30)
    address: String(required=True, max_length=500)
    role: String(required=True, choices=Role)
    business_name: String(max_length=255)


@marketplace.command_handler(part_of=User)
class UpdateProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get_active(command.user_id)
        user.update_profile(
            first_name=command.first_name,
            last_name=command.last_name,
            contact_number=command.contact_number,
            address=command.address,
            role=command.role,
            business_name=command.business_name,
        )
        repo.add(user)
