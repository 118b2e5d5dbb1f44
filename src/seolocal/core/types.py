"""Core type definitions.

PageEntry is the identity of one generatable landing page. Entries are
immutable and recomputed from the taxonomy on every enumeration.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType

# URL slug for a landing page (e.g., "geracao-de-leads-b2b-santos")
# Distinct from display names to catch type mismatches
Slug = NewType("Slug", str)


class EntryKind(str, Enum):
    """Landing page kind."""

    CITY = "cidade"
    CITY_NICHE = "cidade-nicho"
    NEIGHBORHOOD = "bairro"
    FALLBACK = "generico"


@dataclass(frozen=True)
class PageEntry:
    """Landing page identity."""

    slug: Slug
    kind: EntryKind
    city: str | None = None
    niche: str | None = None
    neighborhood: str | None = None
    region: str | None = None
    # Slugs of the taxonomy items the entry was built from, when known
    city_slug: str | None = field(default=None, compare=False, repr=False)
    niche_slug: str | None = field(default=None, compare=False, repr=False)
    neighborhood_slug: str | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        result = {"slug": self.slug, "kind": self.kind.value}
        for key in ("city", "niche", "neighborhood", "region"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


def effective_kind(entry: PageEntry) -> EntryKind:
    """Return the kind used for template dispatch.

    An entry missing the fields its kind requires is treated as FALLBACK,
    so malformed taxonomy data degrades to generic templates instead of
    failing.

    Args:
        entry: Page entry to classify

    Returns:
        The entry's kind, or FALLBACK if required fields are missing
    """
    if entry.kind is EntryKind.CITY and entry.city:
        return EntryKind.CITY
    if entry.kind is EntryKind.CITY_NICHE and entry.city and entry.niche:
        return EntryKind.CITY_NICHE
    if entry.kind is EntryKind.NEIGHBORHOOD and entry.neighborhood:
        return EntryKind.NEIGHBORHOOD
    return EntryKind.FALLBACK
