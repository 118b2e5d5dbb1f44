"""Slug codec for landing pages.

Forward direction only: display names to URL slugs. Each entry kind has
its own namespace prefix, so slugs of different kinds never collide.
Reverse lookup lives in seolocal.core.index.
"""

import re
import unicodedata
from typing import cast

from seolocal.core.types import EntryKind, PageEntry, Slug, effective_kind

CITY_PREFIX = "geracao-de-leads-b2b"
CITY_NICHE_PREFIX = "prospeccao-b2b"
NEIGHBORHOOD_PREFIX = "lista-de-empresas-por-bairro"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Convert a display name to a URL-safe slug.

    Strips diacritics, lowercases and collapses every run of other
    characters into a single hyphen. Idempotent: slugify(slugify(x)) ==
    slugify(x).

    Args:
        name: Display name (e.g., "São Vicente")

    Returns:
        Slug (e.g., "sao-vicente")
    """
    decomposed = unicodedata.normalize("NFKD", name)
    ascii_name = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALNUM.sub("-", ascii_name.lower()).strip("-")


def slug_city(city: str) -> Slug:
    """Build slug for a city page (e.g., geracao-de-leads-b2b-praia-grande)."""
    return Slug(f"{CITY_PREFIX}-{slugify(city)}")


def slug_city_niche(niche: str, city: str) -> Slug:
    """Build slug for a niche-in-city page (e.g., prospeccao-b2b-dentistas-santos)."""
    return Slug(f"{CITY_NICHE_PREFIX}-{slugify(niche)}-{slugify(city)}")


def slug_neighborhood(neighborhood: str) -> Slug:
    """Build slug for a neighborhood page (e.g., lista-de-empresas-por-bairro-vila-mariana)."""
    return Slug(f"{NEIGHBORHOOD_PREFIX}-{slugify(neighborhood)}")


def build_slug(entry: PageEntry) -> Slug:
    """Derive the canonical slug for an entry from its fields.

    Item slugs carried by the entry take precedence over its display
    names, so pinned taxonomy slugs round-trip. Fallback entries have no
    template to derive from and keep the slug they carry.

    Args:
        entry: Page entry

    Returns:
        Canonical slug for the entry
    """
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        return slug_city(entry.city_slug or cast(str, entry.city))
    if kind is EntryKind.CITY_NICHE:
        return slug_city_niche(
            entry.niche_slug or cast(str, entry.niche),
            entry.city_slug or cast(str, entry.city),
        )
    if kind is EntryKind.NEIGHBORHOOD:
        return slug_neighborhood(entry.neighborhood_slug or cast(str, entry.neighborhood))
    return entry.slug


def normalize_slug(value: str) -> str:
    """Strip surrounding slashes and whitespace from an incoming path segment."""
    return value.strip().strip("/")
