# server/models/post.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship, validates
from . import Base


class Post(Base):
    """
    A post owned by exactly one user. user_id is fixed at creation.
    """
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False, default="")
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now, index=True, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    user = relationship("User", lazy="joined", innerjoin=True)

    @validates("title")
    def validate_title(self, key, title):
        if not title or not title.strip():
            raise ValueError("title must not be blank")
        return title

    @validates("user_id")
    def validate_user_id(self, key, user_id):
        if self.user_id is not None and user_id != self.user_id:
            raise ValueError("post owner cannot be reassigned")
        return user_id
