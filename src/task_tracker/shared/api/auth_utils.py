"""
Authentication guard for protected endpoints.
"""

from typing import Optional

from fastapi import Depends, Header

from ...dependencies import get_token_service
from ...services.token_service import TokenService


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    token_service: TokenService = Depends(get_token_service),
) -> dict:
    """
    Verify the bearer token and return the caller's identity.

    Runs before every task handler; a request without a valid token never
    reaches the service layer.

    Raises:
        UnauthenticatedError: Missing or non-bearer Authorization header (401)
        InvalidTokenError: Bad signature, expired or malformed token (403)
    """
    token = token_service.extract_bearer_token(authorization)
    user_id = token_service.verify(token)
    return {"id": user_id}
