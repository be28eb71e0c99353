"""
CMS shape normalizer

Strapi has shipped more than one response envelope for the same field
(v4 wraps entries in ``{"data": {"attributes": {...}}}``, v5 returns flat
objects, and single-relation media can appear in either form). Every
reader of CMS data goes through the helpers below instead of reading
fields directly.

Each helper tries a fixed, ordered tuple of decoders, one per envelope
variant, and returns the first hit. None of them raise: an unknown shape
yields ``None``, ``[]`` or the caller's fallback.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from marketing_site.config import settings

# Decoders return None when their variant does not apply
Decoder = Callable[[Any], Any]

_ABSOLUTE_SCHEMES = ("http://", "https://")


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def _first(value: Any, decoders: tuple[Decoder, ...]) -> Any:
    for decode in decoders:
        result = decode(value)
        if result is not None:
            return result
    return None


# ── Sections ──────────────────────────────────────────────────────────────────


def extract_section(payload: Any, name: str) -> Any:
    """Return the component/section called ``name`` from a CMS payload.

    Lookup order: ``payload[name]`` → ``payload.attributes[name]`` →
    ``payload.data.attributes[name]``. The first value that is not None
    wins; None when the section is absent or the payload is not an object.
    """
    decoders: tuple[Decoder, ...] = (
        lambda p: _get(p, name),
        lambda p: _get(_get(p, "attributes"), name),
        lambda p: _get(_get(_get(p, "data"), "attributes"), name),
    )
    return _first(payload, decoders)


def unwrap_entry(payload: Any) -> Any:
    """Return the fields of a CMS entry, whichever envelope it came in.

    ``{"id": 1, "attributes": {...}}`` yields the attributes object, a flat
    entry is returned as is.
    """
    attributes = _get(payload, "attributes")
    return attributes if isinstance(attributes, dict) else payload


def get_property(obj: Any, path: str, fallback: Any = None) -> Any:
    """Follow a dotted ``path`` through nested dicts; ``fallback`` on any miss."""
    current = obj
    for key in path.split("."):
        if isinstance(current, dict):
            current = current.get(key)
        elif isinstance(current, list) and key.isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            return fallback
        if current is None:
            return fallback
    return current


# ── Text ──────────────────────────────────────────────────────────────────────


def _non_empty_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


_TEXT_DECODERS: tuple[Decoder, ...] = (
    _non_empty_str,
    lambda f: _non_empty_str(_get(f, "text")),
    lambda f: _non_empty_str(_get(f, "content")),
    lambda f: _non_empty_str(_get(f, "value")),
)


def extract_text(field: Any, fallback: str = "") -> str:
    """Return the text of a plain or rich text field.

    A non-empty string is returned as is; otherwise ``.text``, ``.content``
    and ``.value`` are tried in that order. Empty strings count as missing.
    """
    text = _first(field, _TEXT_DECODERS)
    return fallback if text is None else text


# ── Collections ───────────────────────────────────────────────────────────────


_ARRAY_DECODERS: tuple[Decoder, ...] = (
    lambda f: f if isinstance(f, list) else None,
    lambda f: _get(f, "data") if isinstance(_get(f, "data"), list) else None,
    lambda f: [f] if isinstance(f, dict) else None,
)


def to_array(field: Any) -> list[Any]:
    """Return a repeatable component as a list.

    Examples:
        None               → []
        {"x": 1}           → [{"x": 1}]
        [{"x": 1}]         → [{"x": 1}]
        {"data": [{"x":1}]} → [{"x": 1}]
    """
    result = _first(field, _ARRAY_DECODERS)
    return [] if result is None else result


def first_item(field: Any) -> Any:
    """First element of a repeatable component, or None."""
    items = to_array(field)
    return items[0] if items else None


# ── Media ─────────────────────────────────────────────────────────────────────


def cms_base_url(base_url: str | None = None) -> str:
    return (base_url or settings.cms_base_url).rstrip("/")


def absolute_media_url(url: str, base_url: str | None = None) -> str:
    """Prefix a relative media path with the CMS base URL."""
    if url.startswith(_ABSOLUTE_SCHEMES):
        return url
    path = url if url.startswith("/") else f"/{url}"
    return f"{cms_base_url(base_url)}{path}"


def _relation_entry(field: Any) -> Any:
    data = _get(field, "data")
    if isinstance(data, list):
        return data[0] if data else None
    return data


_MEDIA_DECODERS: tuple[Decoder, ...] = (
    _non_empty_str,
    lambda f: _non_empty_str(_get(_get(_relation_entry(f), "attributes"), "url")),
    lambda f: _non_empty_str(_get(_get(f, "attributes"), "url")),
    lambda f: _non_empty_str(_get(f, "url")),
)

_ALT_KEYS = ("alternativeText", "alt")

# Flat media objects: ``alt`` before ``alternativeText``
_FLAT_ALT_KEYS = ("alt", "alternativeText")


def extract_image_url(field: Any, base_url: str | None = None) -> str | None:
    """Resolve a CMS media reference to an absolute URL.

    Accepted shapes, in order: a URL string, a ``{"data": ...}`` relation
    (single or list) with ``attributes.url``, ``{"attributes": {"url"}}``,
    ``{"url": ...}``. Relative URLs are prefixed with the CMS base URL.
    """
    url = _first(field, _MEDIA_DECODERS)
    if url is None:
        return None
    return absolute_media_url(url, base_url)


def extract_image_alt(field: Any) -> str:
    """Alternative text of a CMS media reference; empty when absent."""
    if isinstance(field, str):
        return ""
    entry = _relation_entry(field)
    keys = _ALT_KEYS
    if entry is not None:
        candidates = _get(entry, "attributes")
    elif isinstance(_get(field, "attributes"), dict):
        candidates = _get(field, "attributes")
    else:
        candidates = field
        keys = _FLAT_ALT_KEYS
    for key in keys:
        alt = _non_empty_str(_get(candidates, key))
        if alt is not None:
            return alt
    return ""
