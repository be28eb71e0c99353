"""
Custom Exception Classes for the marketing site

Errors here never come out of the locale or normalization helpers, which
degrade to defaults instead. They are used by the page routes and by the
CMS client's result type.
"""

from typing import Any

from fastapi import status


class SiteError(Exception):
    """Base exception class for all site-related exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Routing Exceptions
# ============================================================================


class PageNotFoundError(SiteError):
    """Raised when a localized path does not map to a known page"""

    def __init__(self, path: str, locale: str | None = None):
        details: dict[str, Any] = {"path": path}
        if locale:
            details["locale"] = locale
        super().__init__(message=f"Page '{path}' not found", status_code=status.HTTP_404_NOT_FOUND, details=details)


# ============================================================================
# CMS Exceptions
# ============================================================================


class CMSFetchError(SiteError):
    """Raised (or returned inside a CMSResult) when the CMS cannot be read"""

    def __init__(self, message: str = "CMS request failed", url: str | None = None, status: int | None = None):
        details: dict[str, Any] = {}
        if url:
            details["url"] = url
        if status is not None:
            details["upstream_status"] = status
        self.url = url
        self.status = status
        super().__init__(message=message, status_code=502, details=details)
