import logging
from typing import Annotated, Any, Dict, Optional
from urllib.parse import quote

from fastapi import APIRouter, Request, Form, status
from fastapi.responses import RedirectResponse

from dependencies import Users, MaybeUser, AppSettings
from models.session import SESSION_USER_KEY
from routes.views import view

logger = logging.getLogger(__name__)

router = APIRouter()


def _redirect(path: str, error: Optional[str] = None) -> RedirectResponse:
    if error:
        path = f"{path}?error={quote(error)}"
    return RedirectResponse(path, status_code=status.HTTP_302_FOUND)


@router.get("/register")
async def register_form(user: MaybeUser, settings: AppSettings, error: Optional[str] = None) -> Dict[str, Any]:
    return view("loginRegister", settings, user, regError=error)


@router.get("/login")
async def login_form(user: MaybeUser, settings: AppSettings, error: Optional[str] = None) -> Dict[str, Any]:
    return view("loginRegister", settings, user, loginError=error)


@router.post("/register")
async def register(users: Users, username: Annotated[str, Form()] = "") -> RedirectResponse:
    """Register a new username, then send the user to the login page"""
    if not username.strip():
        return _redirect("/register", "Username is required")

    if users.find_by_username(username):
        logger.info("Registration refused, username %r already exists", username)
        return _redirect("/register", "Username already exists")

    users.create(username)
    return _redirect("/login")


@router.post("/login")
async def login(request: Request, users: Users, username: Annotated[str, Form()] = "") -> RedirectResponse:
    """Log in by username and remember the user id in the session cookie"""
    user = users.find_by_username(username)
    if user is None:
        logger.info("Login refused for unknown username %r", username)
        return _redirect("/login", "Invalid username")

    request.session[SESSION_USER_KEY] = user.id
    logger.info("User %r logged in", user.username)
    return _redirect("/")


@router.get("/logout")
async def logout(request: Request) -> RedirectResponse:
    # Clearing the session makes SessionMiddleware expire the cookie
    request.session.clear()
    return _redirect("/")
