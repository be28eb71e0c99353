"""
Request locale resolver

Decides, for one inbound request, whether it passes through, is sent to
the owner portal, or is redirected to a locale-prefixed path. The
decision is a pure function of the path, query string, Accept-Language
header and static configuration; it performs no I/O and never raises.

Evaluation order:
  1. /portal/...          → owner portal (absolute URL, query preserved)
  2. other excluded paths → pass through
  3. /                    → /{DEFAULT_LOCALE}
  4. /{locale}/...        → pass through
  5. anything else        → /{preferred locale}{path}
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .locale import DEFAULT_LOCALE, preferred_locale
from .paths import EXCLUDED_PREFIXES, is_excluded_path, locale_prefix_of, starts_with_segment

PORTAL_PREFIX = "/portal"
PORTAL_LANDING_PATH = "/dashboard/owner"


class RoutingAction(str, enum.Enum):
    PASS_THROUGH = "pass_through"
    REDIRECT_EXTERNAL = "redirect_external"
    REDIRECT_LOCALIZED = "redirect_localized"


@dataclass(frozen=True)
class RoutingDecision:
    """
    Outcome of locale resolution for a single request.

    Attributes:
        action: What the middleware should do with the request.
        target: Redirect URL for the two redirect actions, None otherwise.
        locale: Locale the request is (or will be) served in; None for
                excluded paths, which have no locale.
    """

    action: RoutingAction
    target: str | None = None
    locale: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.action is not RoutingAction.PASS_THROUGH


def _with_query(path: str, query: str | None) -> str:
    return f"{path}?{query}" if query else path


def portal_redirect_target(path: str, query: str | None, portal_url: str) -> str:
    """Build the owner portal URL for a /portal/... path."""
    sub_path = path[len(PORTAL_PREFIX):]
    if not sub_path or sub_path == "/":
        sub_path = PORTAL_LANDING_PATH
    return _with_query(f"{portal_url.rstrip('/')}{sub_path}", query)


def resolve_route(
    path: str | None,
    query: str | None = None,
    accept_language: str | None = None,
    *,
    portal_url: str = "http://localhost:3000",
    excluded: tuple[str, ...] | list[str] = EXCLUDED_PREFIXES,
) -> RoutingDecision:
    """Classify a request path into exactly one RoutingDecision.

    Args:
        path:            Request path, e.g. "/pricing".
        query:           Raw query string without the leading "?".
        accept_language: Accept-Language header value, if any.
        portal_url:      Base URL of the owner portal app.
        excluded:        First path segments exempt from locale handling.

    Returns:
        RoutingDecision for the request.
    """
    path = path or "/"

    # Portal redirect wins over the generic exclusion of /portal
    if starts_with_segment(path, PORTAL_PREFIX.strip("/")):
        return RoutingDecision(
            action=RoutingAction.REDIRECT_EXTERNAL,
            target=portal_redirect_target(path, query, portal_url),
        )

    if is_excluded_path(path, excluded):
        return RoutingDecision(action=RoutingAction.PASS_THROUGH)

    if path == "/":
        return RoutingDecision(
            action=RoutingAction.REDIRECT_LOCALIZED,
            target=_with_query(f"/{DEFAULT_LOCALE}", query),
            locale=DEFAULT_LOCALE,
        )

    current = locale_prefix_of(path)
    if current is not None:
        return RoutingDecision(action=RoutingAction.PASS_THROUGH, locale=current)

    locale = preferred_locale(accept_language)
    return RoutingDecision(
        action=RoutingAction.REDIRECT_LOCALIZED,
        target=_with_query(f"/{locale}{path}", query),
        locale=locale,
    )
