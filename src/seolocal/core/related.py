"""Internal link graph between landing pages.

Cross-links follow fixed adjacency rules per entry kind:

- city page: niche-in-city pages of the same city
- niche-in-city page: the city page, the same niche in other cities and
  other niches in the same city
- anything else: all city pages

Candidates keep enumeration order and are cut at the limit.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from seolocal.core.index import get_index
from seolocal.core.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from seolocal.core.types import EntryKind, PageEntry, Slug, effective_kind

DEFAULT_RELATED_LIMIT = 6


def _adjacency(entry: PageEntry) -> Callable[[PageEntry], bool]:
    """Return the adjacency predicate for an entry's kind."""
    kind = effective_kind(entry)

    if kind is EntryKind.CITY:

        def same_city(other: PageEntry) -> bool:
            return other.kind is EntryKind.CITY_NICHE and other.city == entry.city

        return same_city

    if kind is EntryKind.CITY_NICHE:

        def niche_neighbors(other: PageEntry) -> bool:
            if other.kind is EntryKind.CITY:
                return other.city == entry.city
            if other.kind is not EntryKind.CITY_NICHE:
                return False
            same_niche_other_city = other.niche == entry.niche and other.city != entry.city
            same_city_other_niche = other.city == entry.city and other.niche != entry.niche
            return same_niche_other_city or same_city_other_niche

        return niche_neighbors

    def any_city(other: PageEntry) -> bool:
        return other.kind is EntryKind.CITY

    return any_city


def get_related_entries(
    entry: PageEntry,
    limit: int = DEFAULT_RELATED_LIMIT,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> list[PageEntry]:
    """Get entries to cross-link from an entry's page.

    Args:
        entry: Source entry
        limit: Maximum number of related entries
        taxonomy: Taxonomy providing the candidate entries

    Returns:
        Up to limit related entries in enumeration order, never including
        the source entry itself
    """
    if limit <= 0:
        return []

    is_adjacent = _adjacency(entry)
    related: list[PageEntry] = []
    for candidate in get_index(taxonomy).entries:
        if candidate.slug == entry.slug or not is_adjacent(candidate):
            continue
        related.append(candidate)
        if len(related) == limit:
            break
    return related


@dataclass(frozen=True)
class RelatedLink:
    """Link to a related landing page."""

    slug: Slug
    label: str

    @property
    def path(self) -> str:
        """Site-relative URL path."""
        return f"/{self.slug}"

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"slug": self.slug, "label": self.label, "path": self.path}


def link_label(entry: PageEntry) -> str:
    """Anchor text for a link to an entry's page."""
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        return f"Leads em {entry.city}"
    if kind is EntryKind.CITY_NICHE:
        return f"{entry.niche} em {entry.city}"
    if kind is EntryKind.NEIGHBORHOOD:
        return f"Empresas em {entry.neighborhood}"
    return entry.slug


def build_related_links(entries: Iterable[PageEntry]) -> list[RelatedLink]:
    """Project related entries to links."""
    return [RelatedLink(slug=entry.slug, label=link_label(entry)) for entry in entries]
