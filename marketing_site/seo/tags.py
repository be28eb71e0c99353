"""
HTML head tags for resolved SEO metadata.

Rendered with Jinja2 (autoescaped) so CMS-supplied strings cannot break
out of attribute values.
"""

from jinja2 import Environment, select_autoescape

from .metadata import SeoMetadata

_HEAD_TEMPLATE = """\
<title>{{ seo.meta_title }}</title>
<meta name="description" content="{{ seo.meta_description }}">
<link rel="canonical" href="{{ seo.canonical_url }}">
{%- for link in seo.alternates %}
<link rel="alternate" hreflang="{{ link.hreflang }}" href="{{ link.href }}">
{%- endfor %}
<meta property="og:title" content="{{ seo.og_title }}">
<meta property="og:description" content="{{ seo.og_description }}">
<meta property="og:image" content="{{ seo.og_image }}">
<meta property="og:type" content="{{ seo.og_type }}">
<meta property="og:url" content="{{ seo.og_url }}">
<meta property="og:locale" content="{{ seo.og_locale }}">
<meta property="og:site_name" content="{{ seo.og_site_name }}">
<meta name="twitter:card" content="{{ seo.twitter_card }}">
<meta name="twitter:title" content="{{ seo.twitter_title }}">
<meta name="twitter:description" content="{{ seo.twitter_description }}">
<meta name="twitter:image" content="{{ seo.twitter_image }}">
"""

_env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))
_head = _env.from_string(_HEAD_TEMPLATE)


def render_head_tags(seo: SeoMetadata) -> str:
    """Render ``<title>``, meta and link tags for a page ``<head>``."""
    return _head.render(seo=seo)
