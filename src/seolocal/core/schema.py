"""schema.org JSON-LD for landing pages."""

from typing import Any

from seolocal.core.content import DEFAULT_PRODUCT, FaqItem
from seolocal.core.metadata import canonical_url, get_description
from seolocal.core.taxonomy import region_name
from seolocal.core.types import PageEntry

SCHEMA_CONTEXT = "https://schema.org"

# Upper bound for the application description in structured data
DESCRIPTION_MAX_CHARS = 200


def software_application_schema(
    entry: PageEntry,
    *,
    base_url: str,
    product: str = DEFAULT_PRODUCT,
) -> dict[str, Any]:
    """Build SoftwareApplication structured data for a page.

    Args:
        entry: Page entry
        base_url: Site origin used for the page URL
        product: Application name

    Returns:
        JSON-LD dictionary
    """
    schema: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "SoftwareApplication",
        "name": product,
        "url": canonical_url(entry, base_url),
        "applicationCategory": "BusinessApplication",
        "description": get_description(entry)[:DESCRIPTION_MAX_CHARS],
    }

    place = entry.city or entry.neighborhood
    if place:
        area: dict[str, Any] = {"@type": "City", "name": place}
        state = region_name(entry.region)
        if state:
            area["containedInPlace"] = {"@type": "State", "name": state}
        schema["areaServed"] = area

    return schema


def faq_page_schema(faq: list[FaqItem]) -> dict[str, Any] | None:
    """Build FAQPage structured data, or None when there are no questions."""
    if not faq:
        return None
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": item.question,
                "acceptedAnswer": {"@type": "Answer", "text": item.answer},
            }
            for item in faq
        ],
    }
