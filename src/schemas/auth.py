"""Authentication schemas."""

from datetime import datetime
from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, Field

from src.schemas.common import CamelModel, RequestModel


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the value exactly as typed."""
    validate_email(value, check_deliverability=False)
    return value


# Stored and matched byte-for-byte, so no case or IDNA normalisation
RawEmail = Annotated[str, AfterValidator(_check_email)]


class UserRegister(RequestModel):
    """User registration request."""

    name: str = Field(..., min_length=3, max_length=255)
    lastname: str = Field(..., min_length=3, max_length=255)
    email: RawEmail = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=255)


class UserLogin(RequestModel):
    """User login request."""

    email: RawEmail = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=255)


class UserResponse(CamelModel):
    """Stored user without credentials."""

    id: int
    name: str
    lastname: str
    email: str
    email_verified_at: datetime | None
    deleted_at: datetime | None
    created_at: datetime
    updated_at: datetime


class AuthUser(CamelModel):
    """Public user projection returned with a login and embedded in posts."""

    id: int
    name: str
    lastname: str
    email: str


class LoginResponse(BaseModel):
    """Login response with token and user info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: AuthUser


class TokenClaims(BaseModel):
    """Claims carried by a session token."""

    sub: int
    email: str


class CurrentUser(BaseModel):
    """Identity of the caller, taken from a validated token."""

    id: int
    email: str
