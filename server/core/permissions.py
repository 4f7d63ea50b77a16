# server/core/permissions.py

import logging
from core.errors import AppError, ErrorKind
from models.user import User
from models.post import Post


logger = logging.getLogger(__name__)


def ensure_owner(user: User, post: Post) -> None:
    """
    Only the author of a post may modify or delete it.
    Both arguments must be freshly loaded in the current transaction.
    """
    if post.user_id != user.id:
        logger.warning("User %s is not the owner of post %s", user.username, post.id)
        raise AppError(
            ErrorKind.INVALID_PERMISSION,
            f"{user.username} has no permission with post {post.id}",
        )
