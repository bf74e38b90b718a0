"""
Uniform JSON envelope: ``{"success", "status", "data" | "message"}``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse


def server_response(success: bool, status_code: int, payload: Any = None) -> Dict[str, Any]:
    """Build the envelope body; strings go under ``message``, anything else under ``data``."""
    body: Dict[str, Any] = {"success": success, "status": status_code}
    if isinstance(payload, str):
        body["message"] = payload
    elif payload is not None:
        body["data"] = payload
    return body


def envelope(success: bool, status_code: int, payload: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=server_response(success, status_code, payload),
    )


def server_ok(payload: Any = None) -> JSONResponse:
    return envelope(True, status.HTTP_200_OK, payload)


def server_bad_request(message: Optional[str] = None) -> JSONResponse:
    return envelope(False, status.HTTP_400_BAD_REQUEST, message)


def server_error(message: str = "Internal server error") -> JSONResponse:
    return envelope(False, status.HTTP_500_INTERNAL_SERVER_ERROR, message)
