# server/core/user_service.py

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.errors import AppError, ErrorKind
from core.repository import UserRepository
from core.security import PasswordHasher, TokenIssuer
from core.views import UserView
from database import transaction
from models.user import User


logger = logging.getLogger(__name__)


class UserService:
    """
    Registration and login. The hasher and token issuer are injected
    so the flow does not depend on a particular algorithm.
    """

    def __init__(self, db: Session, hasher: PasswordHasher, token_issuer: TokenIssuer):
        self.db = db
        self.users = UserRepository(db)
        self.hasher = hasher
        self.token_issuer = token_issuer

    def join(self, username: str, password: str) -> UserView:
        with transaction(self.db):
            if self.users.find_by_username(username) is not None:
                raise AppError(ErrorKind.DUPLICATED_USER_NAME, f"User name {username} is already taken")

            user = User(username=username, hashed_password=self.hasher.hash(password))
            try:
                self.users.save(user)
            except IntegrityError as e:
                # lost a race against a concurrent join
                raise AppError(ErrorKind.DUPLICATED_USER_NAME, f"User name {username} is already taken") from e
            view = UserView.model_validate(user)

        logger.info("User joined: %s", username)
        return view

    def login(self, username: str, password: str) -> str:
        user = self._get_user(username)
        if not self.hasher.verify(password, user.hashed_password):
            logger.warning("Login failed for %s: invalid password", username)
            raise AppError(ErrorKind.INVALID_PASSWORD)
        return self.token_issuer.issue(user.username)

    def load_user(self, username: str) -> UserView:
        return UserView.model_validate(self._get_user(username))

    def _get_user(self, username: str) -> User:
        user = self.users.find_by_username(username)
        if user is None:
            raise AppError(ErrorKind.USER_NOT_FOUND, f"User {username} not found")
        return user
