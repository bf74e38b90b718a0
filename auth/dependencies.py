"""
FastAPI dependencies for authentication.

Provides ``get_auth_service`` (the façade bound to a request's DB session)
and ``get_current_user`` for routes that need a signed-in account.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Cookie, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import InvalidTokenError
from auth.jwt import TokenSigner, get_token_signer
from auth.service import AuthService
from config.settings import config
from database.helpers import UserStore
from database.models import UserAccount
from database.session import get_db_session


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    signer: TokenSigner = Depends(get_token_signer),
) -> AuthService:
    return AuthService(UserStore(session), signer, bcrypt_rounds=config.bcrypt_rounds)


async def get_access_token(
    access_token: Optional[str] = Cookie(default=None, alias=config.access_token_cookie),
) -> Optional[str]:
    return access_token


async def get_current_user(
    token: Optional[str] = Depends(get_access_token),
    service: AuthService = Depends(get_auth_service),
) -> UserAccount:
    """
    Verify the access-token cookie and load its account.

    Raises ``AccountValidationError`` for a missing cookie and
    ``InvalidTokenError`` for a bad token or a vanished account.
    """
    claims = await service.verify_request_token(token)
    user = await service.find_user_by_email(claims["email"])
    if user is None:
        raise InvalidTokenError()
    return user
