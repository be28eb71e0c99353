"""
i18n (Internationalization) package

Locale registry, path locale helpers and the per-request locale resolver
used by LocaleRedirectMiddleware.
"""

from .locale import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    get_language_info,
    normalize_locale,
    parse_accept_language,
)
from .paths import add_locale, locale_of, localized_path, should_localize, strip_locale
from .resolver import RoutingAction, RoutingDecision, resolve_route

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "RoutingAction",
    "RoutingDecision",
    "add_locale",
    "get_language_info",
    "locale_of",
    "localized_path",
    "normalize_locale",
    "parse_accept_language",
    "resolve_route",
    "should_localize",
    "strip_locale",
]
