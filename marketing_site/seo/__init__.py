"""
SEO package

Static per-locale defaults, the CMS/default metadata resolver and head
tag rendering.
"""

from .defaults import PageDefaults, get_page_defaults
from .metadata import AlternateLink, SeoMetadata, build_alternates, resolve_seo_metadata
from .tags import render_head_tags

__all__ = [
    "AlternateLink",
    "PageDefaults",
    "SeoMetadata",
    "build_alternates",
    "get_page_defaults",
    "render_head_tags",
    "resolve_seo_metadata",
]
