"""Repository for the User aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.identity.user.user import User


@marketplace.repository(part_of=User)
class UserRepository:
    """Lookups that honour the soft-delete flag.

    ``get`` still returns deleted users; every read path that serves a request
    goes through ``get_active`` or ``find_active_by_email`` instead.
    """

    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=email).all().items
        return users[0] if users else None

    def find_active_by_email(self, email: str) -> User | None:
        user = self.find_by_email(email)
        if user is None or user.is_deleted:
            return None
        return user

    def get_active(self, user_id: str) -> User:
        user = self.get(user_id)
        if user.is_deleted:
            raise ObjectNotFoundError({"user": ["User not found"]})
        return user
