"""Landing page engine for Seolocal.

This package provides the taxonomy, slug codec, metadata and content
templates and the internal link graph. Everything here is pure and
computed on demand from the static taxonomy.
"""

from .content import FaqItem, get_faq_block, get_intro_block, get_local_block
from .index import EntryIndex, get_all_slugs, resolve_entry
from .metadata import get_description, get_heading, get_title
from .related import RelatedLink, get_related_entries
from .slugs import build_slug, slug_city, slug_city_niche, slug_neighborhood, slugify
from .taxonomy import DEFAULT_TAXONOMY, Taxonomy, TaxonomyItem, enumerate_entries
from .types import EntryKind, PageEntry, Slug

__all__ = [
    "DEFAULT_TAXONOMY",
    "EntryIndex",
    "EntryKind",
    "FaqItem",
    "PageEntry",
    "RelatedLink",
    "Slug",
    "Taxonomy",
    "TaxonomyItem",
    "build_slug",
    "enumerate_entries",
    "get_all_slugs",
    "get_description",
    "get_faq_block",
    "get_heading",
    "get_intro_block",
    "get_local_block",
    "get_related_entries",
    "get_title",
    "resolve_entry",
    "slug_city",
    "slug_city_niche",
    "slug_neighborhood",
    "slugify",
]
