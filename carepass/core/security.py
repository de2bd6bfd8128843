"""
Core security utilities for bearer-token handling.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import jwt, JWTError
import logging

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Data to encode in the token
        expires_delta: Token expiration time
        secret_key: Signing secret (defaults to the configured secret)
        algorithm: Signing algorithm (defaults to the configured algorithm)

    Returns:
        str: Encoded JWT token
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.access_token_expire_minutes
        )

    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        secret_key or settings.secret_key,
        algorithm=algorithm or settings.algorithm,
    )

def verify_token(
    token: str,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """
    Verify and decode a JWT token.

    Signature, format and expiry are all checked by jose; any failure
    yields None.

    Args:
        token: JWT token string
        secret_key: Verification secret (defaults to the configured secret)
        algorithm: Expected algorithm (defaults to the configured algorithm)

    Returns:
        Dict containing token payload if valid, None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            secret_key or settings.secret_key,
            algorithms=[algorithm or settings.algorithm],
        )
    except JWTError as e:
        logger.info(f"Token rejected: {str(e)}")
        return None
    return payload

def mask_email(email: str) -> str:
    """
    Mask the local part of an email address for logging.

    "jane@example.com" becomes "j***@example.com".
    """
    local, sep, domain = (email or "").partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"
