from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Post(BaseModel):
    id: int
    title: str
    content: str
    username: str
    timestamp: str
    likes: int = 0


class LikeOutcome(Enum):
    LIKED = "liked"
    NOT_FOUND = "not_found"
    SELF_LIKE = "self_like"


class DeleteOutcome(Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    NOT_OWNER = "not_owner"


class LikeResult(BaseModel):
    outcome: LikeOutcome
    likes: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.outcome is LikeOutcome.LIKED


class DeleteResult(BaseModel):
    outcome: DeleteOutcome

