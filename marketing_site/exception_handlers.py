"""
Global Exception Handlers

Error Response Format:
{
    "error": {
        "status_code": 404,
        "message": "Page '/pt/unknown' not found",
        "type": "Not Found",
        "details": {"path": "/pt/unknown", "locale": "pt"},
        "path": "/pt/unknown"
    }
}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from marketing_site.exceptions import SiteError

logger = logging.getLogger(__name__)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        404: "Not Found",
        422: "Validation Error",
        500: "Internal Server Error",
        502: "Bad Gateway",
        503: "Service Unavailable",
    }
    return error_types.get(status_code, "Error")


def create_error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        status_code: HTTP status code
        message: Human-readable error message
        details: Additional error details
        path: Request path that caused the error

    Returns:
        JSONResponse with standardized error format
    """
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


async def site_exception_handler(request: Request, exc: SiteError) -> JSONResponse:
    """Handle SiteError and subclasses."""
    if exc.status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.message, extra={"path": request.url.path})
    else:
        logger.info("%s: %s", type(exc).__name__, exc.message, extra={"path": request.url.path})

    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        details=exc.details,
        path=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the site's exception handlers to ``app``."""
    app.add_exception_handler(SiteError, site_exception_handler)
