"""User directory: lookups by email and account creation."""

import logging

from sqlalchemy.orm import Session

from src.exceptions import ConflictError
from src.models.user import User
from src.schemas.auth import UserRegister, UserResponse
from src.services.credentials import CredentialStore

logger = logging.getLogger(__name__)


class UserDirectory:
    """Service for user lookups and registration."""

    def __init__(self, db: Session, credentials: CredentialStore):
        self.db = db
        self.credentials = credentials

    def find_by_email(
        self, email: str, include_credential: bool = False
    ) -> User | UserResponse | None:
        """Get a user by email.

        Without ``include_credential`` the result is a ``UserResponse``, which
        has no password hash field at all. With it, the ORM row is returned so
        the caller can check the password.
        """
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            return None
        if include_credential:
            return user
        return UserResponse.model_validate(user)

    def create(self, data: UserRegister) -> UserResponse:
        """Create a new user with a hashed password.

        Raises:
            ConflictError: if the email is already registered.
        """
        existing = self.db.query(User.id).filter(User.email == data.email).first()
        if existing:
            logger.info("Registration rejected: email already in use")
            raise ConflictError("E-mail already in use.")

        user = User(
            name=data.name,
            lastname=data.lastname,
            email=data.email,
            password_hash=self.credentials.hash(data.password),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return UserResponse.model_validate(user)
