import logging
import threading
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from models.user import User

logger = logging.getLogger(__name__)


class UserDirectory:
    """In-memory collection of registered users"""

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: List[User] = list(users or [])
        self._next_id = max((user.id for user in self._users), default=0) + 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def find_by_username(self, username: str) -> Optional[User]:
        """Exact, case-sensitive match; the first match wins"""
        with self._lock:
            return next((user for user in self._users if user.username == username), None)

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return next((user for user in self._users if user.id == user_id), None)

    def create(self, username: str) -> User:
        """
        Add a new user and return it.

        Uniqueness is not checked here; callers look the username up first
        and reject duplicates themselves.
        """
        with self._lock:
            user = User(
                id=self._next_id,
                username=username,
                avatar_url=None,
                memberSince=datetime.now(timezone.utc).isoformat(),
            )
            self._users.append(user)
            self._next_id += 1

        logger.info("Registered user %r (id=%s)", user.username, user.id)
        return user
