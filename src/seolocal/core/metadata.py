"""SEO metadata for landing pages.

Titles, meta descriptions, headings and head tags, one fixed template per
entry kind. Entries missing the fields their kind requires get the generic
templates.
"""

from dataclasses import dataclass
from typing import cast

from seolocal.core.taxonomy import region_name
from seolocal.core.types import EntryKind, PageEntry, effective_kind

DEFAULT_BRAND = "Innexar"
DEFAULT_IMAGE_PATH = "/og-image.png"
DEFAULT_LOCALE = "pt_BR"


def get_title(entry: PageEntry, *, brand: str = DEFAULT_BRAND) -> str:
    """Build the page title (for <title>).

    Args:
        entry: Page entry
        brand: Brand suffix appended after a pipe

    Returns:
        Page title
    """
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        return f"Geração de Leads B2B em {entry.city} | {brand}"
    if kind is EntryKind.CITY_NICHE:
        return f"Prospecção B2B para {entry.niche} em {entry.city} | {brand}"
    if kind is EntryKind.NEIGHBORHOOD:
        return f"Lista de Empresas por Bairro: {entry.neighborhood} | {brand}"
    return f"Geração de Leads B2B e Prospecção com IA | {brand}"


def get_description(entry: PageEntry) -> str:
    """Build the meta description, unique per page."""
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        return (
            f"Ferramenta de inteligência comercial B2B para empresas em {entry.city}. "
            "Busca por nicho, análise de concorrência e leads qualificados."
        )
    if kind is EntryKind.CITY_NICHE:
        return (
            f"Prospecção B2B para {entry.niche} em {entry.city}. "
            "Encontre empresas, analise concorrência e gere leads com IA."
        )
    if kind is EntryKind.NEIGHBORHOOD:
        return (
            f"Lista de empresas por bairro: {neighborhood_place(entry)}. "
            "Mapeamento e prospecção B2B com dados reais."
        )
    return "Plataforma B2B para encontrar, analisar e converter empresas por nicho e região."


def get_heading(entry: PageEntry) -> str:
    """Build the page H1."""
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        return f"Ferramenta de Inteligência Comercial para Empresas em {entry.city}"
    if kind is EntryKind.CITY_NICHE:
        return f"Prospecção B2B para {entry.niche} em {entry.city}"
    if kind is EntryKind.NEIGHBORHOOD:
        return f"Lista de Empresas por Bairro: {entry.neighborhood}"
    return "Geração de Leads B2B e Prospecção com IA"


def neighborhood_place(entry: PageEntry) -> str:
    """Neighborhood name qualified by its region name when known."""
    neighborhood = cast(str, entry.neighborhood)
    region = region_name(entry.region)
    return f"{neighborhood}, {region}" if region else neighborhood


@dataclass(frozen=True)
class MetaTag:
    """Document head meta tag (name= or property= attribute)."""

    key: str
    content: str
    is_property: bool = False

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        attr = "property" if self.is_property else "name"
        return {"attribute": attr, "key": self.key, "content": self.content}


def canonical_url(entry: PageEntry, base_url: str) -> str:
    """Absolute canonical URL for an entry's page."""
    return f"{base_url.rstrip('/')}/{entry.slug}"


def build_head_meta(
    entry: PageEntry,
    *,
    base_url: str,
    brand: str = DEFAULT_BRAND,
    image_path: str = DEFAULT_IMAGE_PATH,
) -> list[MetaTag]:
    """Build description, Open Graph and Twitter card tags for a page.

    Returns data only; applying the tags to a document (and restoring the
    previous ones) is the rendering layer's job.

    Args:
        entry: Page entry
        base_url: Site origin (e.g., "https://example.com")
        brand: Brand suffix for the title
        image_path: Share image path relative to base_url

    Returns:
        Meta tags in document order
    """
    title = get_title(entry, brand=brand)
    description = get_description(entry)
    page_url = canonical_url(entry, base_url)
    image_url = f"{base_url.rstrip('/')}/{image_path.lstrip('/')}"

    return [
        MetaTag("description", description),
        MetaTag("og:url", page_url, is_property=True),
        MetaTag("og:title", title, is_property=True),
        MetaTag("og:description", description, is_property=True),
        MetaTag("og:type", "website", is_property=True),
        MetaTag("og:locale", DEFAULT_LOCALE, is_property=True),
        MetaTag("og:image", image_url, is_property=True),
        MetaTag("twitter:card", "summary_large_image"),
        MetaTag("twitter:url", page_url),
        MetaTag("twitter:title", title),
        MetaTag("twitter:description", description),
        MetaTag("twitter:image", image_url),
    ]
