"""
In-memory profile store, keyed by user id.

One instance is created at process start and handed to every request through
the `get_store` dependency. All methods are synchronous, so on the service's
event loop each call runs to completion before the next one starts.
"""
import logging
from typing import Optional

from user_service.schemas import ProfileUpdate, UserProfile, UserRegister

logger = logging.getLogger(__name__)


class UsernameTaken(Exception):
    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' already taken")
        self.username = username


class ProfileNotFound(Exception):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserStore:
    def __init__(self) -> None:
        self._users: dict[str, UserProfile] = {}

    def register(self, body: UserRegister) -> UserProfile:
        """
        Store a new profile.

        Usernames are unique across every stored profile (exact,
        case-sensitive match; linear scan). Ids are not checked: registering
        a known id under a free username replaces the old profile.
        """
        if any(u.username == body.username for u in self._users.values()):
            raise UsernameTaken(body.username)

        if body.id in self._users:
            logger.info("Overwriting profile for existing id %s", body.id)

        profile = UserProfile(**body.model_dump())
        self._users[profile.id] = profile
        return profile

    def update(self, user_id: str, body: ProfileUpdate) -> UserProfile:
        user = self._users.get(user_id)
        if user is None:
            raise ProfileNotFound(user_id)

        user.name = body.name
        user.bio = body.bio
        user.avatar_url = body.avatar_url
        user.cover_url = body.cover_url
        return user

    def get(self, user_id: str) -> Optional[UserProfile]:
        return self._users.get(user_id)

    def __len__(self) -> int:
        return len(self._users)


# Singleton
user_store = UserStore()


def get_store() -> UserStore:
    """FastAPI dependency that yields the process-wide profile store."""
    return user_store
