from typing import Annotated

from fastapi import APIRouter, Query, Response

from dependencies import AppSettings
from services.avatar import render_avatar

router = APIRouter()

MAX_AVATAR_SIZE = 1024


@router.get("/avatar/{username}")
async def avatar(
        username: str,
        settings: AppSettings,
        width: Annotated[int, Query(le=MAX_AVATAR_SIZE)] = 100,
        height: Annotated[int, Query(le=MAX_AVATAR_SIZE)] = 100,
) -> Response:
    """PNG avatar showing the first letter of a username, 100x100 unless a size is given"""
    image = render_avatar(username[:1], width, height, font_path=settings.avatar_font)
    return Response(content=image, media_type="image/png")
