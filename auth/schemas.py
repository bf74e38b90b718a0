"""
Request / response schemas for the auth routes.

Request fields are optional so that missing values reach the façade's own
checks (and their messages) instead of FastAPI's 422.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """Account as returned to clients — there is no password field."""

    model_config = ConfigDict(from_attributes=True)

    user_id: uuid.UUID
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
