"""
Admin Token Verification

SECURITY BOUNDARY - gate admin endpoints.
No generation imports. No retries. No logic.
"""

import hmac
import os
from typing import Optional

from fastapi import Header, HTTPException, status


async def require_admin(
    x_admin_token: Optional[str] = Header(None, alias="X-Admin-Token"),
) -> None:
    """
    Verify the caller is an administrator.

    The caller sends X-Admin-Token; we compare it with ADMIN_API_TOKEN.

    Raises:
        HTTPException(503): ADMIN_API_TOKEN not configured
        HTTPException(401): Missing token header
        HTTPException(403): Invalid token

    Returns:
        None (raises if not an admin)
    """

    expected = os.getenv("ADMIN_API_TOKEN")
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="ADMIN_API_TOKEN not configured"
        )

    if not x_admin_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )

    # Compare (constant-time to prevent timing attacks)
    if not hmac.compare_digest(x_admin_token.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden"
        )
