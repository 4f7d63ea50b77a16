# server/core/errors.py

from enum import Enum
from fastapi import status


class ErrorKind(Enum):
    """
    Closed set of failures the service layer can report.
    Each kind carries the HTTP status it maps to and a default message.
    """
    DUPLICATED_USER_NAME = (status.HTTP_409_CONFLICT, "User name is duplicated")
    USER_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "User not found")
    INVALID_PASSWORD = (status.HTTP_401_UNAUTHORIZED, "Password is invalid")
    POST_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Post not found")
    INVALID_PERMISSION = (status.HTTP_401_UNAUTHORIZED, "Permission is invalid")
    INVALID_TOKEN = (status.HTTP_401_UNAUTHORIZED, "Token is invalid")
    INTERNAL_SERVER_ERROR = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    def __init__(self, http_status: int, default_message: str):
        self.http_status = http_status
        self.default_message = default_message


class AppError(Exception):
    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or kind.default_message
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    def to_response(self) -> dict:
        return {"status": "error", "code": self.kind.name, "message": self.message}
