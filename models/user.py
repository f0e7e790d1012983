from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    id: int
    username: str
    avatar_url: Optional[str] = None
    member_since: str = Field(..., alias="memberSince")
