"""
CMS Client

Read-only access to the Strapi REST API. Every call returns a CMSResult
instead of raising, so page handlers can treat "CMS down" and "section
missing" the same way: the normalizer receives ``None`` and the page falls
back to its static defaults.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from marketing_site.config import settings
from marketing_site.exceptions import CMSFetchError
from marketing_site.i18n.locale import to_cms_locale

logger = logging.getLogger(__name__)

# Populate directives used for every request; components nested in
# `seo` and media on `coverImage` are not expanded by `populate=*` alone
DEFAULT_POPULATE: tuple[str, ...] = ("seo", "coverImage")

DEFAULT_PAGE_SIZE = 50

DEFAULT_SORT = "publishedAt:desc"

# Blog fields matched (case-insensitive substring) by a search
DEFAULT_SEARCH_FIELDS: tuple[str, ...] = ("title", "excerpt", "content")


@dataclass
class CMSResult:
    """Outcome of one CMS request: either a payload or an error."""

    payload: Any = None
    meta: dict[str, Any] | None = None
    error: CMSFetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def items(self) -> list[Any]:
        """Collection entries; empty for single types and failures."""
        return self.payload if isinstance(self.payload, list) else []

    @property
    def first(self) -> Any:
        """First collection entry, or the single-type payload itself."""
        if isinstance(self.payload, list):
            return self.payload[0] if self.payload else None
        return self.payload


def build_query_params(
    locale: str | None = None,
    populate: tuple[str, ...] = DEFAULT_POPULATE,
    filters: dict[str, Any] | None = None,
    page: int | None = None,
    page_size: int | None = None,
    sort: str | None = None,
    search: str | None = None,
    search_fields: tuple[str, ...] = DEFAULT_SEARCH_FIELDS,
) -> list[tuple[str, str]]:
    """
    Build Strapi query parameters.

    Returned as a list of pairs because the bracketed `populate[...]` and
    `filters[...]` keys are sent verbatim.

    Args:
        locale: Site locale code; mapped to the CMS locale
        populate: Relations/components whose children are fully populated
        filters: Field → value; lists become `$in`, scalars `$eq`
        page: Pagination page (1-based)
        page_size: Pagination page size
        sort: Strapi sort expression, e.g. "publishedAt:desc"
        search: Text matched with `$containsi` against any of `search_fields`
        search_fields: Fields combined with `$or` for `search`

    Returns:
        List of (key, value) query parameters
    """
    params: list[tuple[str, str]] = []

    if page is not None:
        params.append(("pagination[page]", str(page)))
    if page_size is not None:
        params.append(("pagination[pageSize]", str(page_size)))
    if sort:
        params.append(("sort", sort))

    params.append(("populate", "*"))
    for name in populate:
        params.append((f"populate[{name}][populate]", "*"))

    for field, value in (filters or {}).items():
        if isinstance(value, (list, tuple)):
            params.append((f"filters[{field}][$in]", ",".join(str(v) for v in value)))
        else:
            params.append((f"filters[{field}][$eq]", str(value)))

    if search:
        for index, field in enumerate(search_fields):
            params.append((f"filters[$or][{index}][{field}][$containsi]", search))

    if locale:
        params.append(("locale", to_cms_locale(locale)))

    return params


class CMSClient:
    """Async client for the CMS REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.cms_base_url).rstrip("/")
        self.token = token if token is not None else settings.cms_api_token
        self.timeout = timeout if timeout is not None else settings.cms_timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def fetch(self, route: str, params: list[tuple[str, str]] | None = None) -> CMSResult:
        """
        GET `{base_url}/api/{route}` and unwrap the `data`/`meta` envelope.

        Args:
            route: API route relative to `/api`, e.g. "blogs" or "home-page"
            params: Query parameters

        Returns:
            CMSResult with `payload` set to the response's `data` member
        """
        url = f"{self.base_url}/api/{route.lstrip('/')}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params, headers=self._headers())
        except httpx.TimeoutException:
            return self._failure(CMSFetchError("CMS request timed out", url=url))
        except httpx.RequestError as e:
            return self._failure(CMSFetchError(f"Error contacting CMS: {e}", url=url))

        if response.status_code >= 400:
            return self._failure(
                CMSFetchError(
                    f"CMS responded with {response.status_code}",
                    url=url,
                    status=response.status_code,
                )
            )

        try:
            body = response.json()
        except ValueError:
            return self._failure(CMSFetchError("Invalid JSON from CMS", url=url, status=response.status_code))

        if not isinstance(body, dict):
            return CMSResult(payload=body)
        meta = body.get("meta")
        return CMSResult(payload=body.get("data"), meta=meta if isinstance(meta, dict) else None)

    def _failure(self, error: CMSFetchError) -> CMSResult:
        logger.warning("%s (%s)", error.message, error.url)
        return CMSResult(error=error)

    async def get_single(self, kind: str, locale: str | None = None) -> CMSResult:
        """Fetch a single type such as `home-page` or `pricing-page`."""
        return await self.fetch(kind, build_query_params(locale=locale))

    async def get_collection(
        self,
        kind: str,
        locale: str | None = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
        filters: dict[str, Any] | None = None,
    ) -> CMSResult:
        """Fetch one page of a collection type such as `blogs`."""
        params = build_query_params(
            locale=locale,
            filters=filters,
            page=page,
            page_size=page_size,
            sort=sort,
        )
        return await self.fetch(kind, params)

    async def search(
        self,
        kind: str,
        query: str,
        locale: str | None = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
    ) -> CMSResult:
        """Fetch collection entries whose title, excerpt or content contains `query`."""
        params = build_query_params(
            locale=locale,
            page=page,
            page_size=page_size,
            sort=sort,
            search=query,
        )
        return await self.fetch(kind, params)

    async def get_by_slug(self, kind: str, slug: str, locale: str | None = None) -> CMSResult:
        """
        Fetch the collection entry whose `slug` equals `slug`.

        The payload is the entry itself (not a list), or None when no entry
        matches.
        """
        result = await self.fetch(kind, build_query_params(locale=locale, filters={"slug": slug}))
        if not result.ok:
            return result
        return CMSResult(payload=result.first, meta=result.meta)


def get_cms_client() -> CMSClient:
    """FastAPI dependency for CMSClient."""
    return CMSClient()
