"""Post schemas."""

from datetime import datetime

from pydantic import Field

from src.schemas.auth import AuthUser
from src.schemas.common import CamelModel, RequestModel
from src.schemas.pagination import PaginationMeta


class PostCreate(RequestModel):
    """Create a new post."""

    title: str = Field(..., min_length=3, max_length=255)


class PostUpdate(RequestModel):
    """Update a post."""

    title: str = Field(..., min_length=3, max_length=255)


class PostResponse(CamelModel):
    """Post response."""

    id: int
    title: str
    user_id: int
    created_at: datetime
    updated_at: datetime | None
    deleted_at: datetime | None


class PostWithAuthorResponse(PostResponse):
    """Post response including its author."""

    user: AuthUser


class PostPage(CamelModel):
    """One page of posts."""

    data: list[PostWithAuthorResponse]
    pagination: PaginationMeta
