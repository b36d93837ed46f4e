"""In-memory user store.

Two variants live here:

  - UserStore: ids are derived from the current record count
    (len + 1), and update replaces both fields. After a removal the
    next create can reuse an id that is still taken.
  - CountingUserStore: ids come from a monotonic counter that never
    goes back, and update merges only the fields that were given.

Lookups are linear scans over the backing list. Every public method
holds the store lock, so FastAPI's threadpool cannot interleave a scan
with a mutation.
"""

import logging
import threading
from enum import Enum
from typing import List, Optional

from user_api.models.user import User

logger = logging.getLogger(__name__)


class StoreVariant(str, Enum):
    BASIC = "basic"
    DTO = "dto"


class UserStore:
    """Ordered in-memory list of users with length-derived ids."""

    variant = StoreVariant.BASIC

    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[User] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def count(self) -> int:
        return len(self)

    def _next_id(self) -> int:
        return len(self._users) + 1

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return -1

    def _apply_update(self, current: User, name: Optional[str], email: Optional[str]) -> User:
        if name is None or email is None:
            raise TypeError("Replacing a user needs both name and email")
        return User(id=current.id, name=name, email=email)

    def create(self, name: str, email: str) -> User:
        with self._lock:
            user = User(id=self._next_id(), name=name, email=email)
            self._users.append(user)
        logger.info("Created user %d (%s)", user.id, self.variant.value)
        return user.model_copy()

    def find_all(self) -> List[User]:
        """Copies of all users; changing them does not change the store."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def find_one(self, user_id: int) -> Optional[User]:
        with self._lock:
            index = self._index_of(user_id)
            if index == -1:
                logger.debug("User %d not found", user_id)
                return None
            return self._users[index].model_copy()

    def update(self, user_id: int, name: str, email: str) -> Optional[User]:
        """
        Replace the name and email of the user with the given id, in place.

        Returns the updated user, or None if no user has that id.
        Raises TypeError if name or email is None.
        """
        return self._update(user_id, name, email)

    def _update(self, user_id: int, name: Optional[str], email: Optional[str]) -> Optional[User]:
        with self._lock:
            index = self._index_of(user_id)
            if index == -1:
                logger.debug("Update skipped, user %d not found", user_id)
                return None
            updated = self._apply_update(self._users[index], name, email)
            self._users[index] = updated
        logger.info("Updated user %d", user_id)
        return updated.model_copy()

    def remove(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index == -1:
                logger.debug("Remove skipped, user %d not found", user_id)
                return False
            del self._users[index]
        logger.info("Removed user %d", user_id)
        return True

    def clear(self) -> None:
        with self._lock:
            self._users.clear()


class CountingUserStore(UserStore):
    """User store with a monotonic id counter and merge-on-update."""

    variant = StoreVariant.DTO

    def __init__(self):
        super().__init__()
        self._last_id = 0

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def update(self, user_id: int, name: Optional[str] = None, email: Optional[str] = None) -> Optional[User]:
        """Merge the given fields into the user; None keeps the current value."""
        return self._update(user_id, name, email)

    def _apply_update(self, current: User, name: Optional[str], email: Optional[str]) -> User:
        changes = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email
        return current.model_copy(update=changes)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
            self._last_id = 0


def build_user_store(variant) -> UserStore:
    """Return an empty store for the given variant name ("basic" or "dto")."""
    try:
        variant = StoreVariant(variant)
    except ValueError:
        raise ValueError(
            f"Unknown user store variant: '{variant}'. "
            f"Expected one of: {', '.join(v.value for v in StoreVariant)}."
        ) from None

    if variant == StoreVariant.BASIC:
        return UserStore()
    return CountingUserStore()
