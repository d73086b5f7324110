"""
Error rendering for the API.

Every error leaves the service as ``{"error": "<message>"}`` with a JSON
content type.  Handlers signal expected failures by raising
``fastapi.HTTPException``; :func:`http_exception_handler` renders them.
Anything else escaping a handler is caught by
:class:`UnhandledErrorMiddleware` and reported as a 500.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response


logger = logging.getLogger(__name__)

INVALID_USER_ID = "Invalid userId format"
USER_NOT_FOUND = "User not found"
INVALID_JSON = "Invalid JSON format"
INVALID_FIELDS = "Missing or invalid required fields"
NOT_FOUND = "Not Found"
INTERNAL_ERROR = "Internal Server Error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body shared by all failure paths."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP exceptions raised by handlers or by the router.

    An unsupported method on a known path is reported like any other
    unmatched route: 404 ``Not Found``.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.debug("No route for %s %s", request.method, request.url.path)
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(exc.status_code, message)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn any uncaught exception into a 500 JSON response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Server Error: %s %s", request.method, request.url.path)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
