"""
Locale Redirect Middleware

Runs resolve_route() for every request and applies the decision:
  - REDIRECT_EXTERNAL  → 307 to the owner portal
  - REDIRECT_LOCALIZED → 307 to the locale-prefixed path
  - PASS_THROUGH       → request.state.locale is set from the URL, then
                         the request continues

The URL is the only source of the active locale; handlers read
request.state.locale instead of any client-side language preference.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from marketing_site.config import settings
from marketing_site.i18n.paths import EXCLUDED_PREFIXES
from marketing_site.i18n.resolver import resolve_route

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class LocaleRedirectMiddleware(BaseHTTPMiddleware):
    """Redirect un-prefixed paths to a locale and expose request.state.locale.

    ``request.state.locale`` is the locale segment of the path, or None on
    excluded paths (API, admin, static...).
    """

    def __init__(
        self,
        app: ASGIApp,
        portal_url: str | None = None,
        excluded: tuple[str, ...] | list[str] | None = None,
        redirect_status: int = 307,
    ):
        super().__init__(app)
        self.portal_url = portal_url or settings.owner_portal_url
        self.excluded = tuple(excluded) if excluded is not None else EXCLUDED_PREFIXES
        self.redirect_status = redirect_status

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        decision = resolve_route(
            request.url.path,
            request.url.query,
            request.headers.get("Accept-Language"),
            portal_url=self.portal_url,
            excluded=self.excluded,
        )
        request.state.locale = decision.locale

        if decision.is_redirect:
            logger.debug("%s %s → %s (%s)", request.method, request.url.path, decision.target, decision.action.value)
            return RedirectResponse(url=decision.target, status_code=self.redirect_status)

        return await call_next(request)
