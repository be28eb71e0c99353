"""
Path locale helpers

Pure functions that detect, add and strip the ``/{locale}`` prefix of a
URL path. Prefixes are matched per path segment: ``/pt`` and ``/pt/...``
carry the ``pt`` locale, ``/ptx`` does not.

Paths under an excluded subtree (admin area, auth flows, the owner portal,
API routes, framework and static routes) never get a locale prefix.
"""

from __future__ import annotations

from .locale import DEFAULT_LOCALE, SUPPORTED_LOCALES, normalize_locale

# First path segments that never receive locale handling
EXCLUDED_PREFIXES: tuple[str, ...] = (
    "admin",
    "auth",
    "portal",
    "api",
    # framework routes
    "docs",
    "redoc",
    "openapi.json",
    "health",
    # static assets and crawler files
    "static",
    "uploads",
    "favicon.ico",
    "robots.txt",
    "sitemap.xml",
)


def starts_with_segment(path: str, segment: str) -> bool:
    """True when ``path`` is ``/segment`` or starts with ``/segment/``."""
    return path == f"/{segment}" or path.startswith(f"/{segment}/")


def _ensure_leading_slash(path: str | None) -> str:
    if not path:
        return "/"
    return path if path.startswith("/") else f"/{path}"


def is_excluded_path(path: str | None, excluded: tuple[str, ...] | list[str] = EXCLUDED_PREFIXES) -> bool:
    """Return True when ``path`` lies under one of the excluded subtrees."""
    clean = _ensure_leading_slash(path)
    return any(starts_with_segment(clean, name.strip("/")) for name in excluded)


def should_localize(path: str | None) -> bool:
    """Return True when ``path`` should carry a locale prefix."""
    return not is_excluded_path(path)


def locale_prefix_of(path: str | None) -> str | None:
    """Return the locale encoded in the first path segment, or None."""
    if not path:
        return None
    for locale in SUPPORTED_LOCALES:
        if starts_with_segment(path, locale):
            return locale
    return None


def has_locale_prefix(path: str | None) -> bool:
    return locale_prefix_of(path) is not None


def locale_of(path: str | None) -> str:
    """Extract the locale from a path.

    Examples:
        "/en/pricing" → "en"
        "/fr"         → "fr"
        "/english"    → DEFAULT_LOCALE  (no partial match)
        "/"           → DEFAULT_LOCALE
    """
    return locale_prefix_of(path) or DEFAULT_LOCALE


def strip_locale(path: str | None) -> str:
    """Remove a leading locale segment.

    Examples:
        "/pt/about" → "/about"
        "/pt"       → "/"
        "/pt/"      → "/"
        "/about"    → "/about"
    """
    if not path or path == "/":
        return "/"
    locale = locale_prefix_of(path)
    if locale is None:
        return path
    rest = path[len(locale) + 1:]
    return rest or "/"


def add_locale(path: str | None, locale: str = DEFAULT_LOCALE) -> str:
    """Prefix ``path`` with ``/{locale}``.

    Excluded paths are returned unchanged. A path that is already
    localized has its existing prefix replaced, so the result always
    carries exactly one locale segment. Unsupported locales are coerced to
    the default locale.
    """
    if path is not None and is_excluded_path(path):
        return path

    locale = normalize_locale(locale)
    clean = strip_locale(_ensure_leading_slash(path))
    if clean == "/":
        return f"/{locale}"
    return f"/{locale}{clean}"


def localized_path(path: str | None, locale: str) -> str:
    """Public URL path of a page in ``locale``.

    The default locale is served prefix-free, every other locale is
    prefixed: ``("/pricing", "pt") → "/pricing"``,
    ``("/pricing", "fr") → "/fr/pricing"``.
    """
    locale = normalize_locale(locale)
    clean = strip_locale(path)
    if locale == DEFAULT_LOCALE:
        return clean
    return add_locale(clean, locale)
