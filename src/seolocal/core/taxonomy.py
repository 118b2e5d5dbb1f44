"""Static taxonomy of landing pages.

The taxonomy is plain data: ordered lists of anchor cities, niches and
neighborhoods. Enumeration turns it into a flat, deterministic list of
PageEntry values. Niche-in-city pages are capped to the first
niche_limit niches and first city_limit cities to bound page volume.
"""

from dataclasses import dataclass, field

from seolocal.core.slugs import slug_city, slug_city_niche, slug_neighborhood, slugify
from seolocal.core.types import EntryKind, PageEntry

DEFAULT_REGION = "BR-SP"

# Administrative region codes to display names
REGION_NAMES: dict[str, str] = {
    "BR-SP": "São Paulo",
}


@dataclass(frozen=True)
class TaxonomyItem:
    """Named taxonomy value with its slug.

    The slug is derived from the name unless given explicitly. A pinned
    slug keeps a published URL stable when the display name changes.
    """

    name: str
    slug: str = ""

    def __post_init__(self) -> None:
        slug = slugify(self.slug or self.name)
        if not slug:
            raise ValueError(f"Taxonomy item has no slug: {self.name!r}")
        object.__setattr__(self, "slug", slug)


def _items(*names: str) -> tuple[TaxonomyItem, ...]:
    return tuple(TaxonomyItem(name) for name in names)


@dataclass(frozen=True)
class Taxonomy:
    """Closed universe of generatable landing pages."""

    cities: tuple[TaxonomyItem, ...]
    niches: tuple[TaxonomyItem, ...]
    neighborhoods: tuple[TaxonomyItem, ...] = field(default_factory=tuple)
    region: str | None = DEFAULT_REGION
    niche_limit: int = 3
    city_limit: int = 3

    def __post_init__(self) -> None:
        if self.niche_limit < 0:
            raise ValueError("niche_limit must not be negative")
        if self.city_limit < 0:
            raise ValueError("city_limit must not be negative")


DEFAULT_TAXONOMY = Taxonomy(
    cities=_items("Praia Grande", "Santos", "São Paulo", "Guarujá", "São Vicente"),
    niches=_items("Dentistas", "Imobiliárias", "Contadores", "Clínicas", "Restaurantes"),
)


def enumerate_entries(taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> list[PageEntry]:
    """Enumerate all landing page entries in deterministic order.

    Order: one city page per city, then niche-in-city pages (niche-major,
    city-minor) over the capped niche and city lists, then one page per
    neighborhood.

    Args:
        taxonomy: Taxonomy to enumerate

    Returns:
        Flat list of page entries
    """
    entries: list[PageEntry] = []
    for city in taxonomy.cities:
        entries.append(
            PageEntry(
                slug=slug_city(city.slug),
                kind=EntryKind.CITY,
                city=city.name,
                region=taxonomy.region,
                city_slug=city.slug,
            ),
        )
    for niche in taxonomy.niches[: taxonomy.niche_limit]:
        for city in taxonomy.cities[: taxonomy.city_limit]:
            entries.append(
                PageEntry(
                    slug=slug_city_niche(niche.slug, city.slug),
                    kind=EntryKind.CITY_NICHE,
                    city=city.name,
                    niche=niche.name,
                    region=taxonomy.region,
                    city_slug=city.slug,
                    niche_slug=niche.slug,
                ),
            )
    for neighborhood in taxonomy.neighborhoods:
        entries.append(
            PageEntry(
                slug=slug_neighborhood(neighborhood.slug),
                kind=EntryKind.NEIGHBORHOOD,
                neighborhood=neighborhood.name,
                region=taxonomy.region,
                neighborhood_slug=neighborhood.slug,
            ),
        )
    return entries


def region_name(region: str | None) -> str | None:
    """Return the display name for a region code, if known."""
    if region is None:
        return None
    return REGION_NAMES.get(region)
