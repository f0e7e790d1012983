import json
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from models.post import Post
from models.user import User
from services.posts import PostStore
from services.users import UserDirectory

logger = logging.getLogger(__name__)


def load_seed(path: Optional[Union[str, Path]] = None) -> Tuple[UserDirectory, PostStore]:
    """
    Build the user directory and post store, optionally filled from a JSON file

    The file holds {"users": [...], "posts": [...]} using the same field names
    as the User and Post models (memberSince, avatar_url, likes, ...).

    :param path: the seed file, or None to start with empty stores
    :return: the user directory and post store
    """
    if path is None:
        return UserDirectory(), PostStore()

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    users = [User.model_validate(row) for row in data.get("users", [])]
    posts = [Post.model_validate(row) for row in data.get("posts", [])]

    logger.info("Loaded %s users and %s posts from %s", len(users), len(posts), path)
    return UserDirectory(users), PostStore(posts)
