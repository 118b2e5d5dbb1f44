"""Tests for SEO metadata templates."""

from seolocal.core.metadata import (
    build_head_meta,
    canonical_url,
    get_description,
    get_heading,
    get_title,
)
from seolocal.core.types import EntryKind, PageEntry, Slug


def _entry(kind: EntryKind, **fields: str) -> PageEntry:
    return PageEntry(slug=Slug("test-slug"), kind=kind, region="BR-SP", **fields)


class TestTitle:
    """Tests for get_title()."""

    def test__city__embeds_city_and_brand(self) -> None:
        """Build city title with brand suffix."""
        entry = _entry(EntryKind.CITY, city="Santos")

        assert get_title(entry) == "Geração de Leads B2B em Santos | Innexar"

    def test__city_niche__embeds_niche_and_city(self) -> None:
        """Build niche-in-city title."""
        entry = _entry(EntryKind.CITY_NICHE, city="Santos", niche="Dentistas")

        assert get_title(entry) == "Prospecção B2B para Dentistas em Santos | Innexar"

    def test__neighborhood__embeds_neighborhood(self) -> None:
        """Build neighborhood title."""
        entry = _entry(EntryKind.NEIGHBORHOOD, neighborhood="Vila Mariana")

        assert get_title(entry) == "Lista de Empresas por Bairro: Vila Mariana | Innexar"

    def test__custom_brand__replaces_suffix(self) -> None:
        """Use the configured brand."""
        entry = _entry(EntryKind.CITY, city="Santos")

        assert get_title(entry, brand="Acme").endswith("| Acme")

    def test__missing_fields__fall_back_to_generic(self) -> None:
        """Degrade to the generic title when required fields are missing."""
        entry = _entry(EntryKind.CITY_NICHE, city="Santos")

        assert get_title(entry) == "Geração de Leads B2B e Prospecção com IA | Innexar"

    def test__fallback_kind__uses_generic(self) -> None:
        """Use the generic title for the fallback kind."""
        entry = _entry(EntryKind.FALLBACK)

        assert get_title(entry) == "Geração de Leads B2B e Prospecção com IA | Innexar"


class TestDescription:
    """Tests for get_description()."""

    def test__city__mentions_business_intelligence(self) -> None:
        """Describe city pages as BI tooling for the city."""
        description = get_description(_entry(EntryKind.CITY, city="Guarujá"))

        assert "inteligência comercial B2B para empresas em Guarujá" in description

    def test__city_niche__mentions_prospecting(self) -> None:
        """Describe niche pages as prospecting for the niche in the city."""
        entry = _entry(EntryKind.CITY_NICHE, city="Santos", niche="Contadores")

        assert get_description(entry).startswith("Prospecção B2B para Contadores em Santos.")

    def test__neighborhood__qualifies_with_region(self) -> None:
        """Qualify neighborhood with the region name."""
        entry = _entry(EntryKind.NEIGHBORHOOD, neighborhood="Vila Mariana")

        assert "Vila Mariana, São Paulo" in get_description(entry)

    def test__neighborhood_without_region__uses_bare_name(self) -> None:
        """Skip the region qualifier when the region is unknown."""
        entry = PageEntry(
            slug=Slug("x"), kind=EntryKind.NEIGHBORHOOD, neighborhood="Moema"
        )

        assert "bairro: Moema." in get_description(entry)

    def test__fallback__is_generic(self) -> None:
        """Use generic description for fallback entries."""
        description = get_description(_entry(EntryKind.CITY))

        assert description.startswith("Plataforma B2B")


class TestHeading:
    """Tests for get_heading()."""

    def test__headings__per_kind(self) -> None:
        """Build H1 per entry kind."""
        assert get_heading(_entry(EntryKind.CITY, city="Santos")) == (
            "Ferramenta de Inteligência Comercial para Empresas em Santos"
        )
        assert get_heading(
            _entry(EntryKind.CITY_NICHE, city="Santos", niche="Dentistas")
        ) == "Prospecção B2B para Dentistas em Santos"
        assert get_heading(_entry(EntryKind.FALLBACK)) == (
            "Geração de Leads B2B e Prospecção com IA"
        )


class TestHeadMeta:
    """Tests for build_head_meta()."""

    def test__canonical_url__joins_origin_and_slug(self) -> None:
        """Join base URL and slug with a single slash."""
        entry = _entry(EntryKind.CITY, city="Santos")

        assert canonical_url(entry, "https://example.com/") == "https://example.com/test-slug"

    def test__tags__include_open_graph_and_twitter(self) -> None:
        """Emit description, Open Graph and Twitter tags."""
        entry = _entry(EntryKind.CITY, city="Santos")

        tags = build_head_meta(entry, base_url="https://example.com")

        by_key = {tag.key: tag for tag in tags}
        assert len(tags) == 12
        assert by_key["og:url"].content == "https://example.com/test-slug"
        assert by_key["og:url"].is_property
        assert by_key["og:title"].content == get_title(entry)
        assert by_key["og:locale"].content == "pt_BR"
        assert by_key["og:image"].content == "https://example.com/og-image.png"
        assert not by_key["twitter:card"].is_property
        assert by_key["description"].content == get_description(entry)

    def test__tag_to_dict__names_attribute(self) -> None:
        """Serialize with the attribute name."""
        entry = _entry(EntryKind.CITY, city="Santos")
        tags = build_head_meta(entry, base_url="https://example.com")

        assert tags[1].to_dict() == {
            "attribute": "property",
            "key": "og:url",
            "content": "https://example.com/test-slug",
        }
