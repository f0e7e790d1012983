from typing import Annotated, Any, Dict

from fastapi import APIRouter, Form, status
from fastapi.responses import RedirectResponse

from dependencies import Posts, CurrentUser
from utils.ids import parse_id

router = APIRouter()


@router.post("/posts")
async def create_post(
        posts: Posts,
        current_user: CurrentUser,
        title: Annotated[str, Form()] = "",
        content: Annotated[str, Form()] = "",
) -> RedirectResponse:
    """Create a new post as the logged-in user"""
    posts.create(title, content, current_user.username)
    return RedirectResponse("/", status_code=status.HTTP_302_FOUND)


@router.post("/like/{post_id}")
async def like_post(post_id: str, posts: Posts, current_user: CurrentUser) -> Dict[str, Any]:
    """
    Like someone else's post.

    Missing posts and attempts to like your own post both answer
    {"success": false}.
    """
    parsed = parse_id(post_id)
    if parsed is None:
        return {"success": False}

    result = posts.like(parsed, current_user.username)
    if not result.success:
        return {"success": False}
    return {"success": True, "likes": result.likes}


@router.post("/delete/{post_id}")
async def delete_post(post_id: str, posts: Posts, current_user: CurrentUser) -> RedirectResponse:
    """Delete one of your own posts; always goes back to the profile page"""
    parsed = parse_id(post_id)
    if parsed is not None:
        posts.delete(parsed, current_user.username)
    return RedirectResponse("/profile", status_code=status.HTTP_302_FOUND)
