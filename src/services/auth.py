"""Authentication service: registration and login."""

import logging

from src.exceptions import UnauthorizedError
from src.schemas.auth import AuthUser, LoginResponse, UserLogin, UserRegister, UserResponse
from src.services.credentials import CredentialStore
from src.services.tokens import TokenIssuer
from src.services.users import UserDirectory

logger = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "E-mail inválido."
INCORRECT_PASSWORD_MESSAGE = "Senha incorreta."  # noqa: S105


class AuthService:
    """Turns directory, credential and token operations into register/login."""

    def __init__(self, users: UserDirectory, credentials: CredentialStore, tokens: TokenIssuer):
        self.users = users
        self.credentials = credentials
        self.tokens = tokens

    def register(self, data: UserRegister) -> UserResponse:
        """Register a new user. ConflictError from the directory propagates as is."""
        return self.users.create(data)

    def login(self, data: UserLogin) -> LoginResponse:
        """Check credentials and issue a session token.

        Both failures are 401s but keep distinct messages.
        """
        user = self.users.find_by_email(data.email, include_credential=True)
        if user is None:
            logger.info("Login failed: unknown email")
            raise UnauthorizedError(INVALID_EMAIL_MESSAGE)

        if not self.credentials.verify(data.password, user.password_hash):
            logger.info(f"Login failed for user {user.id}: incorrect password")
            raise UnauthorizedError(INCORRECT_PASSWORD_MESSAGE)

        access_token = self.tokens.issue(user.id, user.email)

        return LoginResponse(
            access_token=access_token,
            user=AuthUser(id=user.id, name=user.name, lastname=user.lastname, email=user.email),
        )
