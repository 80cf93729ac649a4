"""Public profile lookup."""

from qaforum.database.user_repository import UserRepository
from qaforum.errors import NotFoundError
from qaforum.models.user import User
from qaforum.services.validation import require_object_id


class ProfileService:

    def __init__(self, users: UserRepository):
        self.users = users

    def get_profile(self, profile_id: str) -> User:
        require_object_id(profile_id, "profile")
        user = self.users.get(profile_id)
        if user is None:
            raise NotFoundError("There is no user with that id.")
        return user
