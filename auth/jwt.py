"""
JWT access-token creation and verification.

Tokens are HS256 JWTs (PyJWT) carrying the account email plus ``iat`` and
``exp`` claims. Secret and lifetime are injected at construction; the
module-level ``get_token_signer`` builds one from ``config``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from config.settings import config

logger = logging.getLogger(__name__)


class TokenSigner:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: str,
        expiry_seconds: int = 3600,
        algorithm: str = "HS256",
    ) -> None:
        if not secret:
            raise ValueError("JWT secret is not configured")
        self._secret = secret
        self._algorithm = algorithm
        self.expiry_seconds = expiry_seconds

    def create_token(self, email: str, now: Optional[datetime] = None) -> str:
        """Sign a token for *email* valid for ``expiry_seconds`` from *now*."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "email": email,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.expiry_seconds),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Return the verified claims.

        Raises ``jwt.InvalidTokenError`` (or a subclass such as
        ``ExpiredSignatureError``) when the token is not acceptable.
        """
        return jwt.decode(
            token,
            self._secret,
            algorithms=[self._algorithm],
            options={"require": ["exp", "iat", "email"]},
        )

    async def verify(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Verify signature and expiry, returning the claims or ``None``.

        This is the single verification entry point used by both the
        request-bound check and the programmatic helper.
        """
        try:
            return self.decode(token)
        except jwt.ExpiredSignatureError:
            logger.debug("Token rejected: expired")
        except jwt.InvalidTokenError as exc:
            logger.debug("Token rejected: %s", type(exc).__name__)
        return None


_signer: Optional[TokenSigner] = None


def get_token_signer() -> TokenSigner:
    """Process-wide signer built from ``config`` on first use."""
    global _signer
    if _signer is None:
        _signer = TokenSigner(
            config.jwt_secret,
            expiry_seconds=config.jwt_expiry_seconds,
            algorithm=config.jwt_algorithm,
        )
    return _signer
