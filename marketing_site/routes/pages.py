"""
Page Routes

Locale-prefixed page documents. Each handler fetches its CMS entry,
normalizes the sections it needs and resolves SEO metadata; when the CMS
is unavailable the same document is built from static defaults.

    GET /{locale}                 → home page
    GET /{locale}/blog            → blog listing (?page, ?page_size, ?q)
    GET /{locale}/blog/{slug}     → blog post
    GET /{locale}/{page}          → other static pages

The locale always comes from the URL path.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from marketing_site.cms.client import DEFAULT_PAGE_SIZE, CMSClient, CMSResult, get_cms_client
from marketing_site.cms.normalize import (
    extract_image_alt,
    extract_image_url,
    extract_section,
    extract_text,
    to_array,
    unwrap_entry,
)
from marketing_site.exceptions import PageNotFoundError
from marketing_site.i18n.locale import is_supported_locale, site_locale_for
from marketing_site.i18n.paths import localized_path
from marketing_site.pages import BLOG_CMS_TYPE, BLOG_PATH, PageSpec, get_page_spec
from marketing_site.seo.defaults import PageDefaults, get_page_defaults
from marketing_site.seo.metadata import SeoMetadata, resolve_seo_metadata
from marketing_site.seo.tags import render_head_tags

router = APIRouter(tags=["Pages"])
logger = logging.getLogger(__name__)

DEFAULT_POST_TITLE = "Blog Post"

DEFAULT_POST_DESCRIPTION = "Read our latest blog post"


class Pagination(BaseModel):
    page: int
    page_size: int
    page_count: int | None = None
    total: int | None = None


class PageDocument(BaseModel):
    locale: str
    path: str
    page: str
    cms_available: bool
    sections: dict[str, Any]
    seo: SeoMetadata
    head: str
    pagination: Pagination | None = None


def _as_int(value: Any) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def build_pagination(meta: dict[str, Any] | None, page: int, page_size: int) -> Pagination:
    """
    Pagination block of a listing.

    Values come from the CMS ``meta.pagination`` object; the requested
    page and page size are used where the CMS gave none.
    """
    info = (meta or {}).get("pagination")
    if not isinstance(info, dict):
        info = {}
    return Pagination(
        page=_as_int(info.get("page")) or page,
        page_size=_as_int(info.get("pageSize")) or page_size,
        page_count=_as_int(info.get("pageCount")),
        total=_as_int(info.get("total")),
    )


def _require_locale(locale: str, request: Request) -> str:
    if not is_supported_locale(locale):
        raise PageNotFoundError(request.url.path, locale)
    return locale


def _document(
    locale: str,
    path: str,
    page: str,
    result: CMSResult,
    sections: dict[str, Any],
    seo: SeoMetadata,
    pagination: Pagination | None = None,
) -> PageDocument:
    return PageDocument(
        locale=locale,
        path=path,
        page=page,
        cms_available=result.ok,
        sections=sections,
        seo=seo,
        head=render_head_tags(seo),
        pagination=pagination,
    )


async def _render_static_page(spec: PageSpec, locale: str, cms: CMSClient) -> PageDocument:
    result = await cms.get_single(spec.cms_type, locale)
    payload = result.payload if result.ok else None

    seo = resolve_seo_metadata(
        spec.extract_seo(payload),
        get_page_defaults(spec.path, locale),
        spec.path,
        locale,
    )
    return _document(locale, localized_path(spec.path, locale), spec.cms_type, result, spec.extract_sections(payload), seo)


def summarize_post(entry: Any, locale: str) -> dict[str, Any]:
    """Card fields of a blog entry for listings."""
    post = unwrap_entry(entry) or {}
    if not isinstance(post, dict):
        post = {}
    slug = extract_text(post.get("slug"))
    return {
        "slug": slug,
        "title": extract_text(post.get("title"), DEFAULT_POST_TITLE),
        "excerpt": extract_text(post.get("excerpt")),
        "cover_image": extract_image_url(post.get("coverImage")),
        "cover_image_alt": extract_image_alt(post.get("coverImage")),
        "published_at": post.get("publishedAt"),
        "url": localized_path(f"{BLOG_PATH}/{slug}", locale) if slug else None,
    }


def post_variants(post: dict[str, Any], locale: str) -> dict[str, str]:
    """locale → path of every translation of a post, including itself.

    Translations in a CMS locale the site does not serve are skipped.
    """
    localizations = to_array(post.get("localizations"))
    if not localizations:
        return {}

    variants: dict[str, str] = {}
    slug = extract_text(post.get("slug"))
    if slug:
        variants[locale] = localized_path(f"{BLOG_PATH}/{slug}", locale)
    for item in localizations:
        entry = unwrap_entry(item)
        if not isinstance(entry, dict):
            continue
        other_slug = extract_text(entry.get("slug"))
        if not other_slug:
            continue
        other_locale = site_locale_for(entry.get("locale"))
        if other_locale is None:
            continue
        variants.setdefault(other_locale, localized_path(f"{BLOG_PATH}/{other_slug}", other_locale))
    return variants


@router.get("/{locale}", response_model=PageDocument)
async def home_page(locale: str, request: Request, cms: CMSClient = Depends(get_cms_client)) -> PageDocument:
    """Home page document."""
    locale = _require_locale(locale, request)
    return await _render_static_page(get_page_spec("/"), locale, cms)


@router.get("/{locale}/blog", response_model=PageDocument)
async def blog_listing(
    locale: str,
    request: Request,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    q: str | None = Query(None, max_length=200, description="Search in title, excerpt and content"),
    cms: CMSClient = Depends(get_cms_client),
) -> PageDocument:
    """Blog posts in ``locale``, newest first, optionally filtered by ``q``."""
    locale = _require_locale(locale, request)
    query = q.strip() if q else ""
    if query:
        result = await cms.search(BLOG_CMS_TYPE, query, locale, page=page, page_size=page_size)
    else:
        result = await cms.get_collection(BLOG_CMS_TYPE, locale, page=page, page_size=page_size)

    posts = [summarize_post(entry, locale) for entry in result.items]
    sections: dict[str, Any] = {"posts": posts, "query": query or None}
    seo = resolve_seo_metadata(None, get_page_defaults(BLOG_PATH, locale), BLOG_PATH, locale)
    pagination = build_pagination(result.meta, page, page_size)
    return _document(locale, localized_path(BLOG_PATH, locale), BLOG_CMS_TYPE, result, sections, seo, pagination)


@router.get("/{locale}/blog/{slug}", response_model=PageDocument)
async def blog_post(
    locale: str,
    slug: str,
    request: Request,
    cms: CMSClient = Depends(get_cms_client),
) -> PageDocument:
    """
    Single blog post.

    A post the CMS does not know is a 404. When the CMS cannot be reached
    the page is still served with default metadata.
    """
    locale = _require_locale(locale, request)
    path = f"{BLOG_PATH}/{slug}"
    result = await cms.get_by_slug(BLOG_CMS_TYPE, slug, locale)
    if result.ok and result.payload is None:
        raise PageNotFoundError(request.url.path, locale)

    post = unwrap_entry(result.payload) if result.ok else None
    if not isinstance(post, dict):
        post = {}

    defaults = PageDefaults(
        title=extract_text(post.get("title"), DEFAULT_POST_TITLE),
        description=extract_text(post.get("excerpt"), DEFAULT_POST_DESCRIPTION),
    )
    seo = resolve_seo_metadata(
        extract_section(post, "seo"),
        defaults,
        path,
        locale,
        primary_image=post.get("coverImage"),
        og_type="article",
        static_page=False,
        variants=post_variants(post, locale),
    )

    sections = {
        "post": summarize_post(post, locale) if post else None,
        "content": extract_text(post.get("content")),
    }
    return _document(locale, localized_path(path, locale), BLOG_CMS_TYPE, result, sections, seo)


@router.get("/{locale}/{page}", response_model=PageDocument)
async def static_page(
    locale: str,
    page: str,
    request: Request,
    cms: CMSClient = Depends(get_cms_client),
) -> PageDocument:
    """Any registered static page other than the home page."""
    locale = _require_locale(locale, request)
    spec = get_page_spec(f"/{page}")
    if spec is None:
        raise PageNotFoundError(request.url.path, locale)
    return await _render_static_page(spec, locale, cms)
