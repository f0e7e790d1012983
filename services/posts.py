import logging
import threading
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from models.post import Post, LikeResult, LikeOutcome, DeleteResult, DeleteOutcome

logger = logging.getLogger(__name__)


class PostStore:
    """In-memory collection of posts, kept in insertion order"""

    def __init__(self, posts: Optional[Iterable[Post]] = None):
        self._posts: List[Post] = list(posts or [])
        self._next_id = max((post.id for post in self._posts), default=0) + 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def create(self, title: str, content: str, author_username: str) -> Post:
        """Create a new post with zero likes"""
        with self._lock:
            post = Post(
                id=self._next_id,
                title=title,
                content=content,
                username=author_username,
                timestamp=datetime.now(timezone.utc).isoformat(),
                likes=0,
            )
            self._posts.append(post)
            self._next_id += 1

        logger.info("Created post %s by %r", post.id, author_username)
        return post

    def find_by_id(self, post_id: int) -> Optional[Post]:
        with self._lock:
            return self._find(post_id)

    def list_by_username(self, username: str) -> List[Post]:
        """Get a user's posts in the order they were written"""
        with self._lock:
            return [post for post in self._posts if post.username == username]

    def recent(self) -> List[Post]:
        """Get all posts, most recent first"""
        with self._lock:
            return list(reversed(self._posts))

    def like(self, post_id: int, requesting_username: str) -> LikeResult:
        """
        Add one like to a post on behalf of a user

        Args:
            post_id: The ID of the post to like
            requesting_username: The user giving the like

        Returns:
            LikeResult with the new like count, or the reason the like was
            refused (missing post, or the author liking their own post)
        """
        with self._lock:
            post = self._find(post_id)
            if post is None:
                result = LikeResult(outcome=LikeOutcome.NOT_FOUND)
            elif post.username == requesting_username:
                result = LikeResult(outcome=LikeOutcome.SELF_LIKE)
            else:
                post.likes += 1
                result = LikeResult(outcome=LikeOutcome.LIKED, likes=post.likes)

        logger.info("Like on post %s by %r: %s", post_id, requesting_username, result.outcome.value)
        return result

    def delete(self, post_id: int, requesting_username: str) -> DeleteResult:
        """
        Remove a post if the requesting user wrote it

        Args:
            post_id: The ID of the post to delete
            requesting_username: The user asking for the deletion

        Returns:
            DeleteResult saying whether the post was removed and, if not, why
        """
        with self._lock:
            post = self._find(post_id)
            if post is None:
                result = DeleteResult(outcome=DeleteOutcome.NOT_FOUND)
            elif post.username != requesting_username:
                result = DeleteResult(outcome=DeleteOutcome.NOT_OWNER)
            else:
                self._posts.remove(post)
                result = DeleteResult(outcome=DeleteOutcome.DELETED)

        logger.info("Delete of post %s by %r: %s", post_id, requesting_username, result.outcome.value)
        return result

    def _find(self, post_id: int) -> Optional[Post]:
        # caller holds the lock
        return next((post for post in self._posts if post.id == post_id), None)
