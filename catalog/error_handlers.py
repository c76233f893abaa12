"""
Terminal error handling.

ApiError is rendered with its own status and message; framework errors
(unknown route, bad parameters) are rendered in the same {"error": ...}
shape; anything else becomes a generic 500 and the detail stays in the
server log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import ApiError, ErrorKind

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong!"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


async def api_error_handler(request: Request, exc: ApiError):
    level = logging.INFO if exc.kind is ErrorKind.NOT_FOUND else logging.WARNING
    logger.log(
        level,
        "%s: %s (%s %s)",
        exc.kind.value,
        exc.message,
        request.method,
        request.url.path,
        extra={"error_kind": exc.kind.value, "method": request.method, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    logger.warning(
        "request validation: %s (%s %s)",
        details,
        request.method,
        request.url.path,
        extra={"error_kind": ErrorKind.VALIDATION.value, "method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": details},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.info(
        "http %s: %s (%s %s)",
        exc.status_code,
        exc.detail,
        request.method,
        request.url.path,
        extra={"status_code": exc.status_code, "method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        "unexpected %s: %s (%s %s)",
        type(exc).__name__,
        exc,
        request.method,
        request.url.path,
        exc_info=exc,
        extra={"error_kind": "internal", "method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )
