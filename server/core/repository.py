# server/core/repository.py

from sqlalchemy.orm import Session
from core.pagination import PageRequest
from models.user import User
from models.post import Post


# ids are stored as signed 64-bit integers
MAX_ID = 2**63 - 1


# -------------------------------
# User Directory
# -------------------------------

class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.flush()
        return user


# -------------------------------
# Post Store
# -------------------------------

class PostRepository:
    """
    Posts are always returned newest first, ties broken by id.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, post_id: int, for_update: bool = False) -> Post | None:
        if not 1 <= post_id <= MAX_ID:
            return None
        query = self.db.query(Post).filter(Post.id == post_id)
        if for_update:
            query = query.with_for_update(of=Post)
        # refresh identity-map copies so ownership is checked against the current row
        return query.populate_existing().first()

    def save(self, post: Post) -> Post:
        self.db.add(post)
        self.db.flush()
        return post

    def delete(self, post: Post) -> None:
        self.db.delete(post)
        self.db.flush()

    def find_all(self, request: PageRequest) -> tuple[list[Post], int]:
        return self._page(self.db.query(Post), request)

    def find_all_by_user(self, user: User, request: PageRequest) -> tuple[list[Post], int]:
        return self._page(self.db.query(Post).filter(Post.user_id == user.id), request)

    def _page(self, query, request: PageRequest) -> tuple[list[Post], int]:
        total = query.order_by(None).count()
        posts = (
            query
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset(request.offset)
            .limit(request.size)
            .all()
        )
        return posts, total
