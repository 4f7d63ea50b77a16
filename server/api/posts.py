# server/api/posts.py

from pydantic import BaseModel, Field, field_validator
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from api.auth import get_current_user
from api.responses import success
from core.pagination import MAX_PAGE, MAX_PAGE_SIZE, PageRequest
from core.post_service import PostService
from database import get_db


router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


class PostWriteRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    body: str = ""

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


class PostCreateRequest(PostWriteRequest):
    pass


class PostModifyRequest(PostWriteRequest):
    pass


def get_post_service(db: Session = Depends(get_db)) -> PostService:
    return PostService(db)


def get_page_request(
    page: int = Query(0, ge=0, le=MAX_PAGE),
    size: int = Query(20, ge=1, le=MAX_PAGE_SIZE),
) -> PageRequest:
    return PageRequest(page=page, size=size)


@router.post("")
def create_post(
    req: PostCreateRequest,
    current_user: str = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    return success(service.create(req.title, req.body, current_user))


@router.put("/{post_id}")
def modify_post(
    post_id: int,
    req: PostModifyRequest,
    current_user: str = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    return success(service.modify(req.title, req.body, current_user, post_id))


@router.delete("/{post_id}")
def delete_post(
    post_id: int,
    current_user: str = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    return success({"post_id": service.delete(current_user, post_id)})


# -------------------------------
# Feeds
# -------------------------------

@router.get("")
def list_posts(
    page_request: PageRequest = Depends(get_page_request),
    current_user: str = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    """
    Global feed. Any authenticated user sees every post.
    """
    return success(service.list(page_request))


@router.get("/my")
def list_my_posts(
    page_request: PageRequest = Depends(get_page_request),
    current_user: str = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    return success(service.my_list(current_user, page_request))
