# server/core/pagination.py

import math
from typing import Generic, TypeVar
from pydantic import BaseModel, Field


T = TypeVar("T")

# keeps page * size within a signed 64-bit OFFSET
MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100


class PageRequest(BaseModel):
    """
    Zero-based page index and page size for offset/limit queries.
    """
    page: int = Field(default=0, ge=0, le=MAX_PAGE)
    size: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def of(cls, content: list[T], request: PageRequest, total_elements: int) -> "Page[T]":
        return cls(
            content=content,
            page=request.page,
            size=request.size,
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / request.size),
        )
