"""Account lifecycle — password change and soft delete."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.user import User


@marketplace.command(part_of="User")
class ChangePassword:
    user_id: Identifier(required=True)
    password_hash: String(required=True, max_length=255)


@marketplace.command(part_of="User")
class DeleteAccount:
    """Soft-delete an account. Deleted accounts cannot log in and are hidden from reads."""

    user_id: Identifier(required=True)


@marketplace.command_handler(part_of=User)
class ManageAccountHandler:
    @handle(ChangePassword)
    def change_password(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get_active(command.user_id)
        user.change_password(command.password_hash)
        repo.add(user)

    @handle(DeleteAccount)
    def delete_account(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get_active(command.user_id)
        user.soft_delete()
        repo.add(user)
