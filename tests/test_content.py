"""Tests for content block generation."""

from itertools import combinations

import pytest
from seolocal.core.content import (
    FaqItem,
    get_faq_block,
    get_intro_block,
    get_local_block,
)
from seolocal.core.taxonomy import DEFAULT_TAXONOMY, Taxonomy, TaxonomyItem, enumerate_entries
from seolocal.core.types import EntryKind, PageEntry, Slug


@pytest.fixture
def neighborhood_entries() -> list[PageEntry]:
    """Neighborhood entries from a taxonomy with two neighborhoods."""
    taxonomy = Taxonomy(
        cities=DEFAULT_TAXONOMY.cities,
        niches=DEFAULT_TAXONOMY.niches,
        neighborhoods=(TaxonomyItem("Vila Mariana"), TaxonomyItem("Moema")),
    )
    return [e for e in enumerate_entries(taxonomy) if e.kind is EntryKind.NEIGHBORHOOD]


def _text(entry: PageEntry) -> list[str]:
    """All generated text for an entry."""
    faq = get_faq_block(entry)
    return [
        *get_intro_block(entry),
        *get_local_block(entry),
        *[item.question for item in faq],
        *[item.answer for item in faq],
    ]


def _distinguishing(entry: PageEntry) -> list[str]:
    return [v for v in (entry.city, entry.niche, entry.neighborhood) if v]


class TestBlockShapes:
    """Tests for block sizes per kind."""

    def test__city__two_intro_two_local_three_faq(self, by_slug: dict) -> None:
        """City pages get full content."""
        entry = by_slug["geracao-de-leads-b2b-santos"]

        assert len(get_intro_block(entry)) == 2
        assert len(get_local_block(entry)) == 2
        assert len(get_faq_block(entry)) == 3

    def test__city_niche__two_intro_two_local_three_faq(self, by_slug: dict) -> None:
        """Niche-in-city pages get full content."""
        entry = by_slug["prospeccao-b2b-dentistas-santos"]

        assert len(get_intro_block(entry)) == 2
        assert len(get_local_block(entry)) == 2
        assert len(get_faq_block(entry)) == 3

    def test__neighborhood__two_faq_items(
        self, neighborhood_entries: list[PageEntry]
    ) -> None:
        """Neighborhood pages get two FAQ items."""
        entry = neighborhood_entries[0]

        assert len(get_intro_block(entry)) == 2
        assert len(get_local_block(entry)) == 2
        assert len(get_faq_block(entry)) == 2
        assert "Vila Mariana, São Paulo" in get_intro_block(entry)[0]

    def test__fallback__generic_intro_and_empty_sections(self) -> None:
        """Fallback entries get one generic paragraph and nothing else."""
        entry = PageEntry(slug=Slug("x"), kind=EntryKind.NEIGHBORHOOD)

        assert len(get_intro_block(entry)) == 1
        assert "ProspectorAI" in get_intro_block(entry)[0]
        assert get_local_block(entry) == []
        assert get_faq_block(entry) == []

    def test__product__is_interpolated(self, by_slug: dict) -> None:
        """Use the configured product name."""
        entry = by_slug["geracao-de-leads-b2b-santos"]

        assert "Acme" in get_intro_block(entry, product="Acme")[1]
        assert get_faq_block(entry, product="Acme")[0].answer.startswith("No Acme")


class TestContentUniqueness:
    """Tests for the non-duplication rule."""

    def test__every_text__names_its_entry(
        self, entries: list[PageEntry], neighborhood_entries: list[PageEntry]
    ) -> None:
        """Each paragraph, question and answer mentions a distinguishing name."""
        for entry in [*entries, *neighborhood_entries]:
            names = _distinguishing(entry)
            for text in _text(entry):
                assert any(name in text for name in names), (entry.slug, text)

    def test__faq__differs_across_entries_of_same_kind(
        self, entries: list[PageEntry], neighborhood_entries: list[PageEntry]
    ) -> None:
        """No two entries of the same kind share a FAQ."""
        for first, second in combinations([*entries, *neighborhood_entries], 2):
            if first.kind is second.kind:
                assert get_faq_block(first) != get_faq_block(second)

    def test__no_paragraph__repeats_within_kind(self, entries: list[PageEntry]) -> None:
        """No byte-identical paragraphs across entries of the same kind."""
        for kind in (EntryKind.CITY, EntryKind.CITY_NICHE):
            seen: set[str] = set()
            for entry in (e for e in entries if e.kind is kind):
                for paragraph in [*get_intro_block(entry), *get_local_block(entry)]:
                    assert paragraph not in seen
                    seen.add(paragraph)

    def test__generation__is_deterministic(self, by_slug: dict) -> None:
        """Repeated calls return equal content."""
        entry = by_slug["prospeccao-b2b-contadores-sao-paulo"]

        assert _text(entry) == _text(entry)


class TestFaqItem:
    """Tests for FaqItem."""

    def test__to_dict(self) -> None:
        """Serialize question and answer."""
        item = FaqItem(question="Q?", answer="A.")

        assert item.to_dict() == {"question": "Q?", "answer": "A."}
