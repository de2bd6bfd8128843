"""
Authentication-specific exceptions.
"""
from typing import Optional
from fastapi import HTTPException, status

class AuthException(HTTPException):
    """Base class for authentication exceptions."""
    def __init__(self, status_code: int, detail: str, headers: Optional[dict] = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)

class UnauthenticatedException(AuthException):
    """Exception raised when no bearer token is presented."""
    def __init__(self, detail: str = "Authentication token missing"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class ForbiddenException(AuthException):
    """Exception raised when a bearer token is malformed, badly signed or expired."""
    def __init__(self, detail: str = "Invalid or expired token"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
