"""
Custom middleware for the FastAPI application.
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import uuid

# Set up logging
logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"


def request_user_id(request: Request) -> str:
    """
    Id of the member the Auth Gate let through, if any.

    The gate stores the verified token payload on `request.state.user`;
    public routes never set it.
    """
    payload = getattr(request.state, "user", None)
    if isinstance(payload, dict) and payload.get("id"):
        return str(payload["id"])
    return ANONYMOUS


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request with its id, the caller and the outcome.

    Each request gets a UUID exposed as `X-Request-ID`; `X-Process-Time`
    carries the handling time in seconds.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Request {request_id} failed: {request.method} {request.url.path} "
                f"user={request_user_id(request)} error={str(e)}"
            )
            raise

        process_time = time.perf_counter() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        client_host = request.client.host if request.client else "unknown"
        logger.info(
            f"Request {request_id}: {request.method} {request.url.path} "
            f"status={response.status_code} user={request_user_id(request)} "
            f"client={client_host} duration={process_time:.4f}s"
        )
        return response


def setup_middlewares(app):
    """
    Set up all custom middlewares for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RequestLoggingMiddleware)
