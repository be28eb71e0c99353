"""
SEO metadata resolver

Merges the CMS SEO component of a page with its static, locale-specific
defaults. Every field has a fixed fallback chain:

    meta_title        CMS metaTitle → default title
    meta_description  CMS metaDescription → default description
    og_title          openGraph.ogTitle → CMS metaTitle → meta_title
    og_description    openGraph.ogDescription → CMS metaDescription → meta_description
    og_image          CMS metaImage → openGraph.ogImage → page image → site default image
    canonical_url     CMS canonicalURL → localized route path

The CMS models the SEO block as a repeatable component, so the raw field
is unwrapped with ``first_item`` before use; ``openGraph`` is unwrapped the
same way.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from marketing_site.cms.normalize import extract_image_url, extract_text, first_item, unwrap_entry
from marketing_site.config import settings
from marketing_site.i18n.locale import DEFAULT_LOCALE, SUPPORTED_LOCALES, hreflang, normalize_locale, og_locale
from marketing_site.i18n.paths import localized_path, strip_locale

from .defaults import PageDefaults

TWITTER_CARD = "summary_large_image"

X_DEFAULT = "x-default"


class AlternateLink(BaseModel):
    hreflang: str
    href: str


class SeoMetadata(BaseModel):
    """Resolved SEO fields for one page render."""

    meta_title: str
    meta_description: str
    canonical_url: str
    og_title: str
    og_description: str
    og_image: str
    og_type: str = "website"
    og_url: str
    og_locale: str
    og_site_name: str
    twitter_card: str = TWITTER_CARD
    twitter_title: str
    twitter_description: str
    twitter_image: str
    alternates: list[AlternateLink] = Field(default_factory=list)


def absolute_url(url: str, site_url: str | None = None) -> str:
    """Prefix a site-relative path with the public site URL."""
    if url.startswith(("http://", "https://")):
        return url
    base = (site_url or settings.site_url).rstrip("/")
    return f"{base}{url if url.startswith('/') else '/' + url}"


def _coerce_defaults(defaults: PageDefaults | Mapping[str, Any] | None) -> PageDefaults:
    if isinstance(defaults, PageDefaults):
        return defaults
    if isinstance(defaults, Mapping):
        return PageDefaults(
            title=extract_text(defaults.get("title")),
            description=extract_text(defaults.get("description")),
        )
    return PageDefaults(title="", description="")


def _component(field: Any) -> dict[str, Any]:
    """First entry of a repeatable component as a plain dict ({} when absent)."""
    entry = unwrap_entry(first_item(field))
    return entry if isinstance(entry, dict) else {}


def build_alternates(
    path: str,
    static_page: bool = True,
    variants: Mapping[str, str] | None = None,
    site_url: str | None = None,
) -> list[AlternateLink]:
    """
    hreflang alternates for a page.

    Static pages get one link per supported locale plus ``x-default`` on
    the unprefixed URL. Collection items (blog posts) only get alternates
    for the explicit per-locale ``variants`` supplied by the caller.
    """
    if variants:
        links = [
            AlternateLink(hreflang=hreflang(locale), href=absolute_url(url, site_url))
            for locale, url in variants.items()
            if locale in SUPPORTED_LOCALES
        ]
        if links and DEFAULT_LOCALE in variants:
            links.append(AlternateLink(hreflang=X_DEFAULT, href=absolute_url(variants[DEFAULT_LOCALE], site_url)))
        return links

    if not static_page:
        return []

    links = [
        AlternateLink(hreflang=hreflang(locale), href=absolute_url(localized_path(path, locale), site_url))
        for locale in SUPPORTED_LOCALES
    ]
    links.append(AlternateLink(hreflang=X_DEFAULT, href=absolute_url(strip_locale(path), site_url)))
    return links


def resolve_seo_metadata(
    seo: Any,
    defaults: PageDefaults | Mapping[str, Any] | None,
    path: str,
    locale: str,
    *,
    primary_image: Any = None,
    og_type: str = "website",
    static_page: bool = True,
    variants: Mapping[str, str] | None = None,
    site_url: str | None = None,
    cms_url: str | None = None,
) -> SeoMetadata:
    """
    Resolve the SEO metadata of a page.

    Args:
        seo: Raw CMS ``seo`` field (repeatable component, any envelope, or None)
        defaults: Static defaults for this page and locale
        path: Route path of the page, with or without locale prefix
        locale: Active locale
        primary_image: Main content image (e.g. a post's coverImage), any media shape
        og_type: og:type used when the CMS does not set one
        static_page: False for collection items such as blog posts
        variants: Explicit locale → URL variants of a collection item
        site_url: Public site URL override
        cms_url: CMS base URL override for relative media

    Returns:
        SeoMetadata
    """
    locale = normalize_locale(locale)
    fallback = _coerce_defaults(defaults)
    block = _component(seo)
    open_graph = _component(block.get("openGraph"))

    meta_title = extract_text(block.get("metaTitle"), fallback.title)
    meta_description = extract_text(block.get("metaDescription"), fallback.description)

    og_title = extract_text(open_graph.get("ogTitle"), meta_title)
    og_description = extract_text(open_graph.get("ogDescription"), meta_description)

    og_image = (
        extract_image_url(block.get("metaImage"), cms_url)
        or extract_image_url(open_graph.get("ogImage"), cms_url)
        or extract_image_url(primary_image, cms_url)
        or settings.default_og_image
    )

    canonical = extract_text(block.get("canonicalURL")) or localized_path(path, locale)
    canonical_url = absolute_url(canonical, site_url)

    og_url = extract_text(open_graph.get("ogUrl")) or canonical_url

    return SeoMetadata(
        meta_title=meta_title,
        meta_description=meta_description,
        canonical_url=canonical_url,
        og_title=og_title,
        og_description=og_description,
        og_image=og_image,
        og_type=extract_text(open_graph.get("ogType"), og_type),
        og_url=absolute_url(og_url, site_url),
        og_locale=og_locale(locale),
        og_site_name=settings.site_name,
        twitter_title=og_title,
        twitter_description=og_description,
        twitter_image=og_image,
        alternates=build_alternates(path, static_page=static_page, variants=variants, site_url=site_url),
    )
