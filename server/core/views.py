# server/core/views.py

from datetime import datetime
from pydantic import BaseModel, ConfigDict


class UserView(BaseModel):
    """
    Public view of a user. Never carries the password hash.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    created_at: datetime


class PostView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    user: UserView
    created_at: datetime
    updated_at: datetime
