"""
FastAPI dependencies for request authentication.

The gate reads the bearer token from the `Authorization` header and verifies
it against the process-wide secret. It never touches the database, so a
request without a token is rejected before any lookup happens.
"""
from fastapi import Depends, Header, Request
from typing import Any, Dict, Optional
import logging

from ..config import Settings
from ..core.security import verify_token
from ..dependencies import get_settings
from .exceptions import UnauthenticatedException, ForbiddenException

# Set up logging
logger = logging.getLogger(__name__)

def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Return the credential part of an Authorization header.

    The token is everything after the first space; the scheme word is not
    checked.

    Args:
        authorization: Raw header value

    Returns:
        The token, or None if the header is absent or carries no token
    """
    if not authorization:
        return None
    _, _, token = authorization.partition(" ")
    token = token.strip()
    return token or None

async def require_auth(
    request: Request,
    authorization: Optional[str] = Header(None),
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Gate a route behind a valid bearer token.

    Args:
        request: Current request; the decoded claims are stored on `request.state.user`
        authorization: Authorization header
        app_settings: Settings holding the verification secret

    Returns:
        Dict: Decoded token claims

    Raises:
        UnauthenticatedException: If no token is presented (401)
        ForbiddenException: If the token fails verification (403)
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.warning(f"Unauthenticated request to {request.url.path}")
        raise UnauthenticatedException()

    payload = verify_token(token, app_settings.secret_key, app_settings.algorithm)
    if payload is None:
        logger.warning(f"Rejected token on {request.url.path}")
        raise ForbiddenException()

    if not payload.get("id"):
        logger.warning(f"Token without user identifier on {request.url.path}")
        raise ForbiddenException("Invalid token payload")

    request.state.user = payload
    return payload
