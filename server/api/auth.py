# server/api/auth.py

from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm, OAuth2PasswordBearer
from sqlalchemy.orm import Session
from api.responses import success
from core.errors import AppError, ErrorKind
from core.security import PasswordHasher, TokenIssuer, get_password_hasher, get_token_issuer
from core.user_service import UserService
from database import get_db


router = APIRouter(prefix="/api/v1/users", tags=["users"])


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserJoinRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)


class UserLoginRequest(BaseModel):
    username: str
    password: str


# -------------------------------
# Dependencies
# -------------------------------

def get_user_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> UserService:
    return UserService(db, hasher, token_issuer)


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/users/token", auto_error=False)

def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    if token is None:
        raise AppError(ErrorKind.INVALID_TOKEN, "Not authenticated")
    username = token_issuer.validate(token)
    if username is None:
        raise AppError(ErrorKind.INVALID_TOKEN, "Could not validate credentials")
    return username


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/join")
def join(req: UserJoinRequest, service: UserService = Depends(get_user_service)):
    user = service.join(req.username, req.password)
    return success(user)


@router.post("/login")
def login(req: UserLoginRequest, service: UserService = Depends(get_user_service)):
    access_token = service.login(req.username, req.password)
    return success(Token(access_token=access_token))


@router.post("/token", response_model=Token)
def issue_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: UserService = Depends(get_user_service),
):
    """
    OAuth2 password flow used by the interactive API docs.
    Returns the bare token instead of the success envelope.
    """
    access_token = service.login(form_data.username, form_data.password)
    return Token(access_token=access_token)


@router.get("/me")
def read_users_me(
    current_user: str = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return success(service.load_user(current_user))
