"""
User store — account lookups and inserts over an ``AsyncSession``.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import DuplicateEmailError
from database.models import UserAccount

logger = logging.getLogger(__name__)


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


class UserStore:
    """Persistence for ``UserAccount`` rows."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        result = await self._session.execute(
            select(UserAccount).where(UserAccount.email == email)
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str | uuid.UUID) -> Optional[UserAccount]:
        """
        Return the account or ``None``.

        Raises ``ValueError`` when *user_id* is not a valid UUID.
        """
        return await self._session.get(UserAccount, _to_uuid(user_id))

    async def create(self, name: str, email: str, password_hash: str) -> UserAccount:
        """
        Insert a new account.

        Raises ``DuplicateEmailError`` when the unique email index rejects
        the row.
        """
        user = UserAccount(
            user_id=uuid.uuid4(),
            name=name,
            email=email,
            password=password_hash,
        )
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Insert rejected by unique email index")
            raise DuplicateEmailError() from exc
        return user
