"""Bearer-token authentication dependency.

Usage:
    from app.auth import get_current_identity

    @router.post("/protected")
    async def protected(identity: Identity = Depends(get_current_identity)):
        return {"user_id": identity.id}
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.errors import Unauthorized
from app.services.security import Identity, decode_access_token

logger = logging.getLogger("uvicorn.error")

# Missing/non-Bearer headers come back as None; we raise our own error
bearer = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> Identity:
    """Verify the bearer token and return the caller's identity.

    Raises:
        Unauthorized: No bearer token supplied (401).
        InvalidToken: Token is forged, expired or malformed (400).
    """
    if credentials is None or not credentials.credentials:
        logger.warning("Request without bearer token rejected")
        raise Unauthorized()

    identity = decode_access_token(credentials.credentials)
    logger.debug(f"Authenticated user: {identity.id}")
    return identity
