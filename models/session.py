from dataclasses import dataclass
from typing import Any, Mapping, Union

SESSION_USER_KEY = "user_id"


@dataclass(frozen=True)
class Anonymous:
    """No user has logged in on this client"""

    @property
    def authenticated(self) -> bool:
        return False


@dataclass(frozen=True)
class Authenticated:
    """A user id was stored in the session at login"""
    user_id: int

    @property
    def authenticated(self) -> bool:
        return True


SessionContext = Union[Anonymous, Authenticated]


def session_from_cookie(data: Mapping[str, Any]) -> SessionContext:
    """
    Build the session context from the decoded session cookie.

    Anything other than an integer user id (missing, tampered with, or left
    over from an older cookie layout) counts as anonymous.
    """
    user_id = data.get(SESSION_USER_KEY)
    if isinstance(user_id, int) and not isinstance(user_id, bool):
        return Authenticated(user_id=user_id)
    return Anonymous()
