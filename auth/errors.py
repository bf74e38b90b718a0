"""
Typed failures raised by the auth façade.

Each carries the HTTP status it maps to; ``api.middleware`` renders them
through the response envelope.
"""

from __future__ import annotations

from fastapi import status


class AuthFacadeError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AccountValidationError(AuthFacadeError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid account data"


class DuplicateEmailError(AuthFacadeError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already exists"


class UserNotFoundError(AuthFacadeError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class InvalidCredentialsError(AuthFacadeError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect password"


class EmptyTokenError(AuthFacadeError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Empty Token"


class InvalidTokenError(AuthFacadeError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"
