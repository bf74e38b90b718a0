"""
Auth façade — register, login and token checks over a user store.

Routes stay thin: they parse the body, call one method here, and shape the
response. Every expected failure is raised as an ``AuthFacadeError``.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional, Tuple

from auth.errors import (
    AccountValidationError,
    DuplicateEmailError,
    EmptyTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)
from auth.jwt import TokenSigner
from auth.password import DEFAULT_ROUNDS, hash_password_async, verify_password_async
from auth.schemas import UserPublic
from auth.validation import new_account_validation
from database.helpers import UserStore
from database.models import UserAccount

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        store: UserStore,
        signer: TokenSigner,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ) -> None:
        self._store = store
        self._signer = signer
        self._bcrypt_rounds = bcrypt_rounds

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> UserAccount:
        """Create an account; the email must not be registered yet."""
        validation = new_account_validation(name, email, password)
        if validation is not True:
            raise AccountValidationError(validation)

        if await self._store.find_by_email(email) is not None:
            raise DuplicateEmailError()

        password_hash = await hash_password_async(password, self._bcrypt_rounds)
        user = await self._store.create(name.strip(), email, password_hash)
        logger.info("Registered account %s", user.user_id)
        return user

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> Tuple[Dict[str, Any], str]:
        """
        Check credentials and issue an access token.

        Returns ``(public_user, token)``; the public user never carries the
        password hash.
        """
        if not email or not password:
            raise AccountValidationError("Email and password are required")

        user = await self._store.find_by_email(email)
        if user is None:
            raise UserNotFoundError()

        if not await verify_password_async(password, user.password):
            logger.info("Login rejected for account %s: bad password", user.user_id)
            raise InvalidCredentialsError()

        token = self._signer.create_token(user.email)
        logger.info("Login: account %s", user.user_id)
        return UserPublic.model_validate(user).model_dump(mode="json"), token

    async def verify_request_token(self, token: Optional[str]) -> Dict[str, Any]:
        """Cookie check behind ``GET /verify``; returns the token claims."""
        if not token:
            raise AccountValidationError("Empty token!")
        claims = await self._signer.verify(token)
        if claims is None:
            raise InvalidTokenError()
        return claims

    async def verify_token_value(self, token: Optional[str]) -> bool:
        """
        ``True`` for a valid token, ``False`` for any verification failure.

        Raises ``EmptyTokenError`` when *token* is empty or missing.
        """
        if not token:
            raise EmptyTokenError()
        logger.debug("Verifying token value (%d chars)", len(token))
        return await self._signer.verify(token) is not None

    async def find_user_by_id(self, user_id: str | uuid.UUID) -> Optional[UserAccount]:
        """Unfiltered account lookup; ``None`` when no such account exists."""
        return await self._store.find_by_id(user_id)

    async def find_user_by_email(self, email: str) -> Optional[UserAccount]:
        return await self._store.find_by_email(email)
