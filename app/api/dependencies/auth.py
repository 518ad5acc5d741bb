"""FastAPI authentication dependency.

Identity comes from an upstream gateway that sets the X-User-Id header after
authenticating the caller. This service does not verify tokens itself.
"""

from __future__ import annotations

from fastapi import Header, HTTPException, Request, status
from loguru import logger

USER_ID_HEADER = "X-User-Id"


def get_current_user_id(
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
) -> str:
    """FastAPI dependency returning the authenticated user ID.

    Args:
        request: FastAPI request object (for logging)
        x_user_id: Value of the X-User-Id header

    Returns:
        User ID (string)

    Raises:
        HTTPException: 401 if the header is missing or blank
    """
    user_id = (x_user_id or "").strip()
    if not user_id:
        logger.warning(
            "Auth failed: missing user header",
            path=request.url.path,
            method=request.method,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Not authenticated. Missing {USER_ID_HEADER} header.",
        )
    return user_id
