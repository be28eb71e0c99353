"""
Locale registry

Static set of supported site locales plus the lookup tables derived from
them:
- default locale and membership checks
- Accept-Language header parsing (header order, region and q-value ignored)
- Open Graph / hreflang tags per locale
- CMS locale code mapping
"""

from __future__ import annotations

# ── Constants ─────────────────────────────────────────────────────────────────

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "pt", "fr")

DEFAULT_LOCALE: str = "pt"

# og:locale values
OG_LOCALES: dict[str, str] = {
    "pt": "pt_PT",
    "fr": "fr_FR",
    "en": "en_US",
}

# hreflang values for <link rel="alternate">
HREFLANG_CODES: dict[str, str] = {
    "en": "en",
    "pt": "pt-PT",
    "fr": "fr",
}

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "pt": "Português",
    "fr": "Français",
}

# Locale codes the CMS may return for an entry, mapped to site locales
_CMS_LOCALE_ALIASES: dict[str, str] = {
    "en": "en",
    "en-gb": "en",
    "en-us": "en",
    "pt": "pt",
    "pt-br": "pt",
    "pt-pt": "pt",
    "fr": "fr",
    "fr-fr": "fr",
    "fr-ca": "fr",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def is_supported_locale(locale: object) -> bool:
    """Return True when ``locale`` is exactly one of SUPPORTED_LOCALES."""
    return isinstance(locale, str) and locale in SUPPORTED_LOCALES


def normalize_locale(locale: object) -> str:
    """Return ``locale`` if supported, otherwise the default locale."""
    return locale if is_supported_locale(locale) else DEFAULT_LOCALE


def parse_accept_language(header: str | None, supported: tuple[str, ...] | list[str] = SUPPORTED_LOCALES) -> str | None:
    """Return the first language in an Accept-Language header that the site supports.

    Tags are considered in the order they appear in the header. Quality
    values and region subtags are dropped, so ``fr-FR;q=0.9`` is read as
    ``fr``. Malformed entries are skipped.

    Args:
        header:    Value of the Accept-Language HTTP header, e.g.
                   "fr-FR,fr;q=0.9,en;q=0.8".
        supported: Locale codes to match against.

    Returns:
        The first matching code from ``supported``, or None.
    """
    if not header or not isinstance(header, str):
        return None

    for part in header.split(","):
        tag = part.split(";", 1)[0].strip().lower()
        if not tag:
            continue
        base = tag.split("-", 1)[0].split("_", 1)[0]
        if base in supported:
            return base

    return None


def preferred_locale(header: str | None) -> str:
    """Accept-Language → supported locale, falling back to DEFAULT_LOCALE."""
    return parse_accept_language(header) or DEFAULT_LOCALE


def og_locale(locale: str) -> str:
    return OG_LOCALES.get(locale, OG_LOCALES[DEFAULT_LOCALE])


def hreflang(locale: str) -> str:
    return HREFLANG_CODES.get(locale, locale)


def to_cms_locale(locale: str) -> str:
    """Site locale → locale code sent to the CMS (codes are shared)."""
    return normalize_locale(locale)


def site_locale_for(cms_locale: str | None) -> str | None:
    """CMS locale code → site locale, or None when the site does not serve it."""
    if not cms_locale or not isinstance(cms_locale, str):
        return None
    return _CMS_LOCALE_ALIASES.get(cms_locale.lower())


def from_cms_locale(cms_locale: str | None) -> str:
    """CMS locale code (e.g. "pt-BR", "fr-CA") → site locale, default when unknown."""
    return site_locale_for(cms_locale) or DEFAULT_LOCALE


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return a metadata dict describing the given locale.

    Args:
        locale: Site locale code, e.g. "pt".

    Returns:
        Dict with keys: ``code``, ``name``, ``hreflang``, ``og_locale`` and
        ``is_default``.
    """
    return {
        "code": locale,
        "name": LANGUAGE_NAMES.get(locale, locale),
        "hreflang": hreflang(locale),
        "og_locale": og_locale(locale),
        "is_default": locale == DEFAULT_LOCALE,
    }
