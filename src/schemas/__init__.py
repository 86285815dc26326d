"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    AuthUser,
    CurrentUser,
    LoginResponse,
    TokenClaims,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.schemas.pagination import PaginationMeta
from src.schemas.post import (
    PostCreate,
    PostPage,
    PostResponse,
    PostUpdate,
    PostWithAuthorResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthUser",
    "LoginResponse",
    "TokenClaims",
    "CurrentUser",
    "PaginationMeta",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostWithAuthorResponse",
    "PostPage",
]
