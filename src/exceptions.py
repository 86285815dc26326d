"""Domain errors raised by the services and mapped to HTTP responses at the boundary."""

from typing import Any


class AppError(Exception):
    """Base class for errors that carry their own HTTP status.

    ``detail`` is sent back unchanged: a plain string for simple messages, or a
    dict/list for structured payloads.
    """

    status_code: int = 500

    def __init__(self, detail: Any, headers: dict[str, str] | None = None):
        super().__init__(detail if isinstance(detail, str) else repr(detail))
        self.detail = detail
        self.headers = headers


class ValidationError(AppError):
    """Malformed or out-of-range input."""

    status_code = 400


class UnauthorizedError(AppError):
    """Bad credentials, invalid token, or acting on someone else's resource."""

    status_code = 401

    def __init__(self, detail: Any = "Unauthorized", headers: dict[str, str] | None = None):
        super().__init__(detail, headers or {"WWW-Authenticate": "Bearer"})


class NotFoundError(AppError):
    """Missing or soft-deleted resource."""

    status_code = 404


class ConflictError(AppError):
    """Write rejected because it would duplicate a unique value."""

    status_code = 409
