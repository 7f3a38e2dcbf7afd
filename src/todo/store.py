from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from .models import User

logger = logging.getLogger(__name__)


class UserStore:
    """In-memory, insertion-ordered collection of users.

    Lookups are linear scans. The store does not enforce username uniqueness;
    callers check :meth:`username_exists` before :meth:`insert`.
    """

    def __init__(self) -> None:
        self._users: List[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        for user in self._users:
            if user.username == username:
                return user
        return None

    def find_by_id(self, user_id: Optional[str]) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def username_exists(self, username: Optional[str]) -> bool:
        return self.find_by_username(username) is not None

    def insert(self, user: User) -> User:
        self._users.append(user)
        logger.debug("Stored user %s (%d total)", user.id, len(self._users))
        return user
