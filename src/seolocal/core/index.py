"""Reverse slug lookup over the enumerated taxonomy.

Resolving a slug is the routing layer's hot path: most incoming paths are
not landing pages, so "not found" is an ordinary result (None), never an
exception.
"""

import logging
from functools import cache

from seolocal.core.slugs import normalize_slug
from seolocal.core.taxonomy import DEFAULT_TAXONOMY, Taxonomy, enumerate_entries
from seolocal.core.types import EntryKind, PageEntry, Slug

logger = logging.getLogger(__name__)


class EntryIndex:
    """Enumerated entries with O(1) slug lookups.

    Keeps entries in enumeration order alongside a slug index, the same
    way a site keeps its flat page list plus a path index.
    """

    __slots__ = ("_entries", "_slug_index")

    def __init__(self, entries: list[PageEntry]) -> None:
        """Initialize index.

        Args:
            entries: Entries in enumeration order

        Raises:
            ValueError: If two entries share a slug
        """
        self._entries = tuple(entries)
        self._slug_index: dict[str, int] = {}
        for i, entry in enumerate(self._entries):
            if entry.slug in self._slug_index:
                raise ValueError(f"Duplicate slug in taxonomy: {entry.slug}")
            self._slug_index[entry.slug] = i

    @classmethod
    def from_taxonomy(cls, taxonomy: Taxonomy) -> "EntryIndex":
        """Build index from a taxonomy's enumeration."""
        index = cls(enumerate_entries(taxonomy))
        logger.debug(f"Indexed {len(index)} landing page entries")
        return index

    @property
    def entries(self) -> tuple[PageEntry, ...]:
        """All entries in enumeration order."""
        return self._entries

    def get(self, slug: str) -> PageEntry | None:
        """Get entry by slug.

        Args:
            slug: Slug, optionally with surrounding slashes (e.g., "/geracao-de-leads-b2b-santos/")

        Returns:
            PageEntry if found, None otherwise
        """
        idx = self._slug_index.get(normalize_slug(slug))
        if idx is None:
            return None
        return self._entries[idx]

    def slugs(self) -> list[Slug]:
        """All slugs in enumeration order."""
        return [entry.slug for entry in self._entries]

    def of_kind(self, kind: EntryKind) -> list[PageEntry]:
        """Entries of a given kind in enumeration order."""
        return [entry for entry in self._entries if entry.kind is kind]

    def __contains__(self, slug: object) -> bool:
        return isinstance(slug, str) and normalize_slug(slug) in self._slug_index

    def __len__(self) -> int:
        return len(self._entries)


@cache
def get_index(taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> EntryIndex:
    """Return the shared index for a taxonomy.

    Taxonomies are immutable, so the index is built once per taxonomy.
    """
    return EntryIndex.from_taxonomy(taxonomy)


def resolve_entry(slug: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> PageEntry | None:
    """Resolve a slug to its landing page entry.

    Args:
        slug: Incoming slug
        taxonomy: Taxonomy to resolve against

    Returns:
        PageEntry if the slug belongs to the taxonomy, None otherwise
    """
    return get_index(taxonomy).get(slug)


def get_all_slugs(taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> list[Slug]:
    """All known slugs, for sitemaps and 404 checks."""
    return get_index(taxonomy).slugs()
