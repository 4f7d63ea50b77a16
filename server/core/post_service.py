# server/core/post_service.py

import logging
from sqlalchemy.orm import Session
from core.errors import AppError, ErrorKind
from core.pagination import Page, PageRequest
from core.permissions import ensure_owner
from core.repository import PostRepository, UserRepository
from core.views import PostView
from database import transaction
from models.post import Post
from models.user import User


logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.posts = PostRepository(db)

    # -------------------------------
    # Mutations
    # -------------------------------

    def create(self, title: str, body: str, username: str) -> PostView:
        with transaction(self.db):
            user = self._get_user(username)
            post = self.posts.save(Post(title=title, body=body, user_id=user.id, user=user))
            view = PostView.model_validate(post)

        logger.info("Post %s created by %s", view.id, username)
        return view

    def modify(self, title: str, body: str, username: str, post_id: int) -> PostView:
        with transaction(self.db):
            user = self._get_user(username)
            post = self._get_post_for_update(post_id)
            ensure_owner(user, post)

            post.title = title
            post.body = body
            self.posts.save(post)
            view = PostView.model_validate(post)

        logger.info("Post %s modified by %s", post_id, username)
        return view

    def delete(self, username: str, post_id: int) -> int:
        with transaction(self.db):
            user = self._get_user(username)
            post = self._get_post_for_update(post_id)
            ensure_owner(user, post)
            self.posts.delete(post)

        logger.info("Post %s deleted by %s", post_id, username)
        return post_id

    # -------------------------------
    # Feeds
    # -------------------------------

    def list(self, request: PageRequest) -> Page[PostView]:
        posts, total = self.posts.find_all(request)
        return Page[PostView].of([PostView.model_validate(p) for p in posts], request, total)

    def my_list(self, username: str, request: PageRequest) -> Page[PostView]:
        user = self._get_user(username)
        posts, total = self.posts.find_all_by_user(user, request)
        return Page[PostView].of([PostView.model_validate(p) for p in posts], request, total)

    def _get_user(self, username: str) -> User:
        user = self.users.find_by_username(username)
        if user is None:
            raise AppError(ErrorKind.USER_NOT_FOUND, f"User {username} not found")
        return user

    def _get_post_for_update(self, post_id: int) -> Post:
        post = self.posts.find_by_id(post_id, for_update=True)
        if post is None:
            raise AppError(ErrorKind.POST_NOT_FOUND, f"Post {post_id} not found")
        return post
