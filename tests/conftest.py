"""
Shared fixtures: an in-memory user store, a signer and an app wired to them.
"""

from __future__ import annotations

import uuid
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from auth.dependencies import get_auth_service
from auth.errors import DuplicateEmailError
from auth.jwt import TokenSigner
from auth.service import AuthService
from database.models import UserAccount

TEST_SECRET = "test-secret-key-for-access-tokens-0123456789"


class InMemoryUserStore:
    """Dict-backed stand-in for ``database.helpers.UserStore``."""

    def __init__(self) -> None:
        self.users: Dict[uuid.UUID, UserAccount] = {}

    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id) -> Optional[UserAccount]:
        uid = uuid.UUID(user_id) if isinstance(user_id, str) else user_id
        return self.users.get(uid)

    async def create(self, name: str, email: str, password_hash: str) -> UserAccount:
        if await self.find_by_email(email) is not None:
            raise DuplicateEmailError()
        user = UserAccount(user_id=uuid.uuid4(), name=name, email=email, password=password_hash)
        self.users[user.user_id] = user
        return user


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def secret() -> str:
    return TEST_SECRET


@pytest.fixture
def signer(secret) -> TokenSigner:
    return TokenSigner(secret, expiry_seconds=3600)


@pytest.fixture
def service(store, signer) -> AuthService:
    # Lowest bcrypt cost keeps the suite fast.
    return AuthService(store, signer, bcrypt_rounds=4)


@pytest.fixture
def app(service):
    from main import create_app

    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: service
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
