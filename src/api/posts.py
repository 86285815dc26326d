"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from src.api.dependencies import get_current_user, get_post_service
from src.schemas.auth import CurrentUser
from src.schemas.post import PostCreate, PostPage, PostResponse, PostUpdate, PostWithAuthorResponse
from src.services.posts import DEFAULT_PAGE, DEFAULT_PER_PAGE, PostService

router = APIRouter(prefix="/posts", tags=["posts"])

# Ids are 32-bit INTEGER columns; the same bound keeps OFFSET within a BIGINT
MAX_INT = 2**31 - 1

PageParam = Annotated[int, Query(le=MAX_INT)]
PerPageParam = Annotated[int, Query(alias="perPage", le=MAX_INT)]
PostIdParam = Annotated[int, Path(le=MAX_INT)]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a new post."""
    return post_service.create(current_user.id, post_data)


@router.get("", response_model=PostPage)
def get_posts(
    post_service: Annotated[PostService, Depends(get_post_service)],
    page: PageParam = DEFAULT_PAGE,
    per_page: PerPageParam = DEFAULT_PER_PAGE,
):
    """Get a page of all posts, newest first."""
    return post_service.list_paginated(page, per_page)


# Declared before /{post_id} so "my" is not read as an id
@router.get("/my", response_model=PostPage)
def get_my_posts(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
    page: PageParam = DEFAULT_PAGE,
    per_page: PerPageParam = DEFAULT_PER_PAGE,
):
    """Get a page of the current user's posts, newest first."""
    return post_service.list_paginated_for_owner(current_user.id, page, per_page)


@router.get("/{post_id}", response_model=PostWithAuthorResponse)
def get_post(
    post_id: PostIdParam,
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Get a specific post with its author."""
    return post_service.get_by_id(post_id)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: PostIdParam,
    post_data: PostUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Update a post (owner only)."""
    return post_service.update(current_user.id, post_id, post_data)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: PostIdParam,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Soft delete a post (owner only)."""
    post_service.remove(current_user.id, post_id)
