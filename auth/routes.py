"""
Auth API routes — register, login, token check, logout, current user.

Route prefix: /api/v1/auth
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.responses import server_ok
from auth.dependencies import get_access_token, get_auth_service, get_current_user
from auth.schemas import LoginRequest, RegisterRequest, UserPublic
from auth.service import AuthService
from config.settings import config
from database.models import UserAccount

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", name="create user")
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Register a new account."""
    await service.register(req.name, req.email, req.password)
    return server_ok()


@router.post("/login", name="login user")
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Login with email + password; sets the access-token cookie."""
    user, token = await service.login(req.email, req.password)
    response = server_ok({"user": user})
    response.set_cookie(
        config.access_token_cookie,
        token,
        httponly=True,
        secure=config.cookie_secure,
        samesite=config.cookie_samesite,
    )
    return response


@router.get("/verify", name="is token ok")
async def verify(
    token: Optional[str] = Depends(get_access_token),
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    await service.verify_request_token(token)
    return server_ok("Token accepted")


@router.post("/logout", name="logout user")
async def logout() -> JSONResponse:
    response = server_ok("Logged out")
    response.delete_cookie(
        config.access_token_cookie,
        httponly=True,
        secure=config.cookie_secure,
        samesite=config.cookie_samesite,
    )
    return response


@router.get("/me", name="current user")
async def me(user: UserAccount = Depends(get_current_user)) -> JSONResponse:
    return server_ok({"user": UserPublic.model_validate(user).model_dump(mode="json")})
