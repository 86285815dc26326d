"""FastAPI dependencies for authentication, database and services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.exceptions import UnauthorizedError
from src.schemas.auth import CurrentUser
from src.services.auth import AuthService
from src.services.credentials import CredentialStore
from src.services.posts import PostService
from src.services.tokens import TokenIssuer
from src.services.users import UserDirectory

# auto_error=False so a missing header becomes our own 401 rather than FastAPI's default
security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Get the token issuer. Raises ValueError when JWT_SECRET is unset."""
    return TokenIssuer.from_settings(get_settings())


@lru_cache
def get_credential_store() -> CredentialStore:
    """Get the password hasher configured with the settings' work factor."""
    return CredentialStore(rounds=get_settings().bcrypt_rounds)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentUser:
    """Get the caller's identity from the bearer token, without a database lookup."""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    claims = tokens.validate(credentials.credentials)
    if claims is None:
        raise UnauthorizedError("Invalid authentication credentials")

    return CurrentUser(id=claims.sub, email=claims.email)


def get_user_directory(
    db: Annotated[Session, Depends(get_db)],
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
) -> UserDirectory:
    """Get user directory with dependencies."""
    return UserDirectory(db, credentials)


def get_auth_service(
    users: Annotated[UserDirectory, Depends(get_user_directory)],
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(users, credentials, tokens)


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(db)
