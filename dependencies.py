import logging
from typing import Annotated, Optional

from fastapi import Request, Depends

from config import Settings, get_settings
from models.session import SessionContext, session_from_cookie
from models.user import User
from services.errors import LoginRequired
from services.posts import PostStore
from services.users import UserDirectory

logger = logging.getLogger(__name__)


async def get_user_directory(request: Request) -> UserDirectory:
    """Get user directory from app state"""
    return request.app.state.users


async def get_post_store(request: Request) -> PostStore:
    """Get post store from app state"""
    return request.app.state.posts


async def get_session_context(request: Request) -> SessionContext:
    """Read the signed session cookie into a session context"""
    return session_from_cookie(request.session)


def resolve_current_user(session: SessionContext, users: UserDirectory) -> Optional[User]:
    """
    Get the logged-in user for a session, or None.

    A session whose user id no longer resolves is treated as anonymous.
    """
    if not session.authenticated:
        return None
    return users.find_by_id(session.user_id)


async def get_current_user(
        session: Annotated[SessionContext, Depends(get_session_context)],
        users: Annotated[UserDirectory, Depends(get_user_directory)],
) -> Optional[User]:
    return resolve_current_user(session, users)


async def require_authenticated(
        request: Request,
        user: Annotated[Optional[User], Depends(get_current_user)],
) -> User:
    """
    Access guard for protected routes, raises LoginRequired (redirect to /login)
    when nobody is logged in
    """
    if user is None:
        logger.debug("Unauthenticated request to %s", request.url.path)
        raise LoginRequired()
    return user


# Type annotations for dependency injection
Users = Annotated[UserDirectory, Depends(get_user_directory)]
Posts = Annotated[PostStore, Depends(get_post_store)]
MaybeUser = Annotated[Optional[User], Depends(get_current_user)]
CurrentUser = Annotated[User, Depends(require_authenticated)]
AppSettings = Annotated[Settings, Depends(get_settings)]
