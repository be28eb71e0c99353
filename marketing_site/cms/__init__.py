"""
CMS package

CMSClient fetches Strapi content; the normalize helpers turn whatever
envelope the CMS used into predictable Python values.
"""

from .client import CMSClient, CMSResult, get_cms_client
from .normalize import (
    extract_image_alt,
    extract_image_url,
    extract_section,
    extract_text,
    first_item,
    get_property,
    to_array,
    unwrap_entry,
)

__all__ = [
    "CMSClient",
    "CMSResult",
    "extract_image_alt",
    "extract_image_url",
    "extract_section",
    "extract_text",
    "first_item",
    "get_cms_client",
    "get_property",
    "to_array",
    "unwrap_entry",
]
