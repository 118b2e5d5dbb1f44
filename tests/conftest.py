"""Shared test fixtures."""

import pytest
from seolocal.config import Config, ServerConfig, SiteConfig, TaxonomyConfig
from seolocal.core.taxonomy import DEFAULT_TAXONOMY, enumerate_entries
from seolocal.core.types import PageEntry


@pytest.fixture
def entries() -> list[PageEntry]:
    """Enumeration of the default taxonomy."""
    return enumerate_entries(DEFAULT_TAXONOMY)


@pytest.fixture
def by_slug(entries: list[PageEntry]) -> dict[str, PageEntry]:
    """Default entries keyed by slug."""
    return {entry.slug: entry for entry in entries}


@pytest.fixture
def test_config() -> Config:
    """Create a configuration with the default taxonomy and a test origin."""
    return Config(
        server=ServerConfig(),
        site=SiteConfig(base_url="https://example.com"),
        taxonomy=TaxonomyConfig(),
    )
