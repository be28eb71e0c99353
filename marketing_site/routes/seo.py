"""
SEO Routes

Provides sitemap.xml and robots.txt. Both live under excluded paths, so
the locale middleware never redirects them.
"""

import logging
from xml.etree.ElementTree import Element, SubElement, tostring  # nosec B405

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from marketing_site.cms.client import CMSClient, get_cms_client
from marketing_site.cms.normalize import extract_text, unwrap_entry
from marketing_site.config import settings
from marketing_site.i18n.locale import DEFAULT_LOCALE
from marketing_site.pages import BLOG_CMS_TYPE, BLOG_PATH, STATIC_PAGES
from marketing_site.seo.metadata import AlternateLink, absolute_url, build_alternates

router = APIRouter(tags=["SEO"])
logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"


def _add_url(parent: Element, loc: str, alternates: list[AlternateLink], lastmod: str | None = None) -> None:
    """Add a URL entry (with hreflang alternates) to the sitemap."""
    url = SubElement(parent, "url")
    SubElement(url, "loc").text = loc
    if lastmod:
        SubElement(url, "lastmod").text = lastmod
    for link in alternates:
        SubElement(url, "xhtml:link", rel="alternate", hreflang=link.hreflang, href=link.href)


def generate_sitemap(blog_posts: list[dict] | None = None) -> str:
    """
    Generate XML sitemap.

    Static pages are listed once, on their default-locale URL, with one
    alternate per locale. Blog posts are listed per entry without
    alternates.
    """
    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)
    urlset.set("xmlns:xhtml", XHTML_NS)

    for path in [*STATIC_PAGES, BLOG_PATH]:
        _add_url(urlset, absolute_url(path), build_alternates(path))

    for post in blog_posts or []:
        entry = unwrap_entry(post)
        if not isinstance(entry, dict):
            continue
        slug = extract_text(entry.get("slug"))
        if not slug:
            continue
        lastmod = extract_text(entry.get("updatedAt"))[:10] or None
        _add_url(urlset, absolute_url(f"{BLOG_PATH}/{slug}"), [], lastmod=lastmod)

    xml_declaration = '<?xml version="1.0" encoding="UTF-8"?>\n'
    return xml_declaration + tostring(urlset, encoding="unicode")


def generate_robots_txt() -> str:
    lines = [
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin",
        "Disallow: /auth",
        "Disallow: /portal",
        "Disallow: /api",
        "",
        f"Sitemap: {settings.site_url.rstrip('/')}/sitemap.xml",
    ]
    return "\n".join(lines)


@router.get("/sitemap.xml")
async def get_sitemap(cms: CMSClient = Depends(get_cms_client)) -> Response:
    """XML sitemap of static pages and default-locale blog posts."""
    result = await cms.get_collection(BLOG_CMS_TYPE, DEFAULT_LOCALE)
    sitemap_xml = generate_sitemap(result.items)
    logger.info("Generated sitemap with %d blog posts", len(result.items))

    return Response(
        content=sitemap_xml,
        media_type="application/xml",
        headers={"Cache-Control": "public, max-age=3600"},
    )


@router.get("/robots.txt")
async def get_robots_txt() -> Response:
    return Response(content=generate_robots_txt(), media_type="text/plain")
