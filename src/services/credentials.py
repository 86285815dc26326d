"""Password hashing and verification."""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 10


class CredentialStore:
    """Hashes and verifies passwords with bcrypt. Plaintext never leaves this class."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash. Unreadable hashes count as a mismatch."""
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Stored password hash could not be checked: {e}")
            return False
