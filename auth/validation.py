"""
Validation rules for new accounts.

``new_account_validation`` returns ``True`` or a human-readable message
describing the first rule that failed.
"""

from __future__ import annotations

import re
from typing import Optional, Union

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 8
# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _validate_name(name: Optional[str]) -> Union[bool, str]:
    if not name or not name.strip():
        return "Name is required"
    if not NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH:
        return f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
    return True


def _validate_email(email: Optional[str]) -> Union[bool, str]:
    if not email:
        return "Email is required"
    if len(email) > EMAIL_MAX_LENGTH or not _EMAIL_RE.match(email):
        return "Email is not valid"
    return True


def _validate_password(password: Optional[str]) -> Union[bool, str]:
    if not password:
        return "Password is required"
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
    if len(password.encode()) > PASSWORD_MAX_BYTES:
        return f"Password must be at most {PASSWORD_MAX_BYTES} bytes"
    if not re.search(r"[A-Za-z]", password) or not re.search(r"\d", password):
        return "Password must contain letters and numbers"
    return True


def new_account_validation(
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> Union[bool, str]:
    for result in (
        _validate_name(name),
        _validate_email(email),
        _validate_password(password),
    ):
        if result is not True:
            return result
    return True
