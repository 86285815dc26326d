"""JWT session token issuing and validation."""

import logging
from datetime import UTC, datetime, timedelta

import pydantic
from jose import JWTError, jwt

from src.config import Settings
from src.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Mints and validates signed, stateless session tokens.

    Tokens are never stored or revoked; expiry is the only way they end.
    """

    def __init__(
        self, secret: str | None, algorithm: str = "HS256", expiration_minutes: int = 1440
    ):
        if not secret:
            raise ValueError("JWT_SECRET is not configured")
        self.secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiration_minutes=settings.jwt_expiration_minutes,
        )

    def issue(self, user_id: int, email: str) -> str:
        """Create a JWT access token for a user."""
        now = datetime.now(UTC)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + self.expiration,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def validate(self, token: str) -> TokenClaims | None:
        """Decode and validate a JWT token.

        Returns None for malformed, tampered or expired tokens and for tokens
        that lack the subject or email claim.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            return None

        try:
            return TokenClaims.model_validate(payload)
        except pydantic.ValidationError:
            logger.debug("Rejected token with missing or malformed claims")
            return None
