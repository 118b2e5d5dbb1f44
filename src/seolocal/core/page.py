"""Landing page assembly.

Combines metadata, content blocks, related links and structured data for
one entry. Every part is derived independently from the entry, so the
same slug always yields the same page.
"""

from dataclasses import dataclass
from typing import Any

from seolocal.core.content import (
    DEFAULT_PRODUCT,
    INSTITUTIONAL_BLOCK,
    FaqItem,
    get_faq_block,
    get_intro_block,
    get_local_block,
)
from seolocal.core.index import get_index
from seolocal.core.metadata import (
    DEFAULT_BRAND,
    DEFAULT_IMAGE_PATH,
    MetaTag,
    build_head_meta,
    canonical_url,
    get_description,
    get_heading,
    get_title,
)
from seolocal.core.related import (
    DEFAULT_RELATED_LIMIT,
    RelatedLink,
    build_related_links,
    get_related_entries,
)
from seolocal.core.schema import faq_page_schema, software_application_schema
from seolocal.core.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from seolocal.core.types import PageEntry

DEFAULT_BASE_URL = "https://prospectorai.innexar.com.br"


@dataclass(frozen=True)
class SiteSettings:
    """Site identity used in generated copy and URLs."""

    base_url: str = DEFAULT_BASE_URL
    brand: str = DEFAULT_BRAND
    product: str = DEFAULT_PRODUCT
    image_path: str = DEFAULT_IMAGE_PATH
    related_limit: int = DEFAULT_RELATED_LIMIT


@dataclass
class LandingPage:
    """Everything a renderer needs for one landing page."""

    entry: PageEntry
    title: str
    description: str
    heading: str
    canonical_url: str
    head_meta: list[MetaTag]
    intro: list[str]
    local_block: list[str]
    institutional: list[str]
    faq: list[FaqItem]
    related: list[RelatedLink]
    structured_data: list[dict[str, Any]]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "meta": {
                "slug": self.entry.slug,
                "kind": self.entry.kind.value,
                "title": self.title,
                "description": self.description,
                "canonical": self.canonical_url,
                "tags": [tag.to_dict() for tag in self.head_meta],
            },
            "entry": self.entry.to_dict(),
            "heading": self.heading,
            "intro": self.intro,
            "local": self.local_block,
            "institutional": self.institutional,
            "faq": [item.to_dict() for item in self.faq],
            "related": [link.to_dict() for link in self.related],
            "structured_data": self.structured_data,
        }


class LandingPageBuilder:
    """Builds landing pages for a taxonomy and site identity."""

    def __init__(
        self,
        taxonomy: Taxonomy = DEFAULT_TAXONOMY,
        site: SiteSettings | None = None,
    ) -> None:
        self._taxonomy = taxonomy
        self._site = site or SiteSettings()
        self._index = get_index(taxonomy)

    @property
    def taxonomy(self) -> Taxonomy:
        return self._taxonomy

    @property
    def site(self) -> SiteSettings:
        return self._site

    def entries(self) -> list[PageEntry]:
        """All entries in enumeration order."""
        return list(self._index.entries)

    def resolve(self, slug: str) -> PageEntry | None:
        """Resolve a slug, returning None for unknown slugs."""
        return self._index.get(slug)

    def build(self, slug: str) -> LandingPage | None:
        """Build the page for a slug.

        Args:
            slug: Incoming slug (surrounding slashes allowed)

        Returns:
            LandingPage, or None if the slug is not a landing page
        """
        entry = self.resolve(slug)
        if entry is None:
            return None
        return self.build_entry(entry)

    def build_entry(self, entry: PageEntry) -> LandingPage:
        """Build the page for an entry."""
        site = self._site
        faq = get_faq_block(entry, product=site.product)

        structured_data = [
            software_application_schema(entry, base_url=site.base_url, product=site.product),
        ]
        faq_schema = faq_page_schema(faq)
        if faq_schema is not None:
            structured_data.append(faq_schema)

        related = get_related_entries(entry, site.related_limit, self._taxonomy)

        return LandingPage(
            entry=entry,
            title=get_title(entry, brand=site.brand),
            description=get_description(entry),
            heading=get_heading(entry),
            canonical_url=canonical_url(entry, site.base_url),
            head_meta=build_head_meta(
                entry,
                base_url=site.base_url,
                brand=site.brand,
                image_path=site.image_path,
            ),
            intro=get_intro_block(entry, product=site.product),
            local_block=get_local_block(entry),
            institutional=list(INSTITUTIONAL_BLOCK),
            faq=faq,
            related=build_related_links(related),
            structured_data=structured_data,
        )
