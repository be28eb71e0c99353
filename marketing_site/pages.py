"""
Static page registry

Maps each locale-free route path to the CMS single type holding its
content and the sections the page reads from it. Sections listed in
``repeatable`` are always returned as lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from marketing_site.cms.normalize import extract_section, to_array


@dataclass(frozen=True)
class PageSpec:
    path: str
    cms_type: str
    sections: tuple[str, ...]
    repeatable: frozenset[str] = field(default_factory=frozenset)
    seo_field: str = "seo"

    def extract_sections(self, payload: Any) -> dict[str, Any]:
        """Pull every section of this page out of a CMS payload (None → all absent)."""
        sections: dict[str, Any] = {}
        for name in self.sections:
            value = extract_section(payload, name)
            sections[name] = to_array(value) if name in self.repeatable else value
        return sections

    def extract_seo(self, payload: Any) -> Any:
        return extract_section(payload, self.seo_field)


STATIC_PAGES: dict[str, PageSpec] = {
    spec.path: spec
    for spec in (
        PageSpec(
            path="/",
            cms_type="home-page",
            sections=(
                "heroSection",
                "featuresSection",
                "howItWorksSection",
                "testimonialsSection",
                "faqSection",
                "ctaSection",
            ),
        ),
        PageSpec(
            path="/pricing",
            cms_type="pricing-page",
            sections=("heroTitle", "heroSubtitle", "basicPlan", "premiumPlan", "trustPoints", "faqSection"),
            repeatable=frozenset({"trustPoints"}),
        ),
        PageSpec(
            path="/about",
            cms_type="about-page",
            sections=("heroSection", "missionSection", "valuesSection", "teamSection", "ctaSection"),
            repeatable=frozenset({"valuesSection", "teamSection"}),
        ),
        PageSpec(
            path="/full-service-management",
            cms_type="full-service-management",
            sections=("heroSection", "servicesSection", "faqSection", "ctaSection"),
            repeatable=frozenset({"servicesSection"}),
        ),
        PageSpec(
            path="/enhanced-direct-bookings",
            cms_type="enhanced-direct-bookings-page",
            sections=("hero", "whatWeDo", "includes", "benefits", "howItWorks", "steps", "faqs", "cta"),
            repeatable=frozenset({"steps", "faqs"}),
        ),
        PageSpec(
            path="/green-pledge",
            cms_type="green-pledge",
            sections=("heroSection", "pledgeSection", "ctaSection"),
        ),
    )
}

BLOG_PATH = "/blog"

BLOG_CMS_TYPE = "blogs"


def get_page_spec(path: str) -> PageSpec | None:
    """Registered page for a locale-free path, or None."""
    return STATIC_PAGES.get(path)
