from typing import Any, Dict, Optional

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from dependencies import Users, Posts, MaybeUser, CurrentUser, AppSettings
from routes.views import view, user_payload
from utils.ids import parse_id

router = APIRouter()


@router.get("/")
async def home(posts: Posts, user: MaybeUser, settings: AppSettings) -> Dict[str, Any]:
    """List every post, most recent first"""
    return view(
        "home",
        settings,
        user,
        posts=[post.model_dump() for post in posts.recent()],
        user=user_payload(user),
    )


@router.get("/error")
async def error_page(user: MaybeUser, settings: AppSettings) -> Dict[str, Any]:
    return view("error", settings, user)


@router.get("/post/{post_id}", response_model=None)
async def post_detail(
        post_id: str,
        posts: Posts,
        users: Users,
        user: MaybeUser,
        settings: AppSettings,
):
    """Show one post together with its author"""
    parsed = parse_id(post_id)
    post = posts.find_by_id(parsed) if parsed is not None else None
    if post is None:
        return RedirectResponse("/error", status_code=status.HTTP_302_FOUND)

    author: Optional[Dict[str, Any]] = user_payload(users.find_by_username(post.username))
    return view(
        "postDetail",
        settings,
        user,
        post={**post.model_dump(), "user": author},
        user=user_payload(user),
    )


@router.get("/profile")
async def profile(posts: Posts, user: CurrentUser, settings: AppSettings) -> Dict[str, Any]:
    """List the logged-in user's own posts"""
    return view(
        "profile",
        settings,
        user,
        user=user_payload(user),
        posts=[post.model_dump() for post in posts.list_by_username(user.username)],
    )
