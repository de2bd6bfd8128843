"""
Global exception handlers and custom exception classes.
"""
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging

# Set up logging
logger = logging.getLogger(__name__)


class FatalConfigError(RuntimeError):
    """
    Raised when configuration is missing or unrecognized.

    Never handled by the request pipeline: it surfaces while the application
    is being built so the process exits before serving anything.
    """


class AppException(Exception):
    """
    Base exception class for application-specific exceptions.
    """
    def __init__(self, status_code: int, detail: str, error: Optional[str] = None):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.error = error


class ValidationException(AppException):
    """Exception raised when a request is missing required data."""
    def __init__(self, detail: str = "Validation error"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class MissingFieldException(ValidationException):
    """Exception raised when a required field is empty or absent."""
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class NotFoundException(AppException):
    """Exception raised when a requested resource does not exist."""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status.HTTP_404_NOT_FOUND, detail)


class ConflictException(AppException):
    """Exception raised when a resource already exists."""
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status.HTTP_409_CONFLICT, detail)


class DispatchError(AppException):
    """
    Exception raised when an email transport fails to deliver a message.

    Attributes:
        transport: Name of the transport that failed
        cause: The underlying transport exception
    """
    def __init__(self, transport: str, cause: BaseException):
        self.transport = transport
        self.cause = cause
        super().__init__(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to send email",
            error=str(cause),
        )

    def __str__(self) -> str:
        return f"{self.transport} transport failed: {self.cause}"


class StorageError(AppException):
    """Exception raised when a record cannot be persisted."""
    def __init__(self, cause: BaseException, detail: str = "Failed to save record"):
        self.cause = cause
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail, error=str(cause))


def error_body(message: str, detail=None) -> dict:
    """
    Build the JSON body shared by every error response.

    `message` is the human-readable message; `detail` carries the same text,
    or the field errors for a validation failure.
    """
    return {"message": message, "detail": message if detail is None else detail}


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Standardized error response
    """
    content = error_body(exc.detail)
    if exc.status_code >= 500:
        # Full cause stays in the server log; the caller gets the message and error string
        logger.error(f"Application error on {request.url.path}: {exc}", exc_info=getattr(exc, "cause", None))
        content["error"] = exc.error
    else:
        logger.warning(f"Application error on {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for HTTP exceptions raised by routing and the auth dependencies.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Standardized error response, exception headers kept
    """
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.

    Args:
        request: The request that caused the exception
        exc: The validation exception instance

    Returns:
        JSONResponse: 400 response with validation details
    """
    logger.warning(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation error", jsonable_encoder(exc.errors())),
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
