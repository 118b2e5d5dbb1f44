"""Tests for server module."""

from typing import Any

import pytest
from seolocal.app_keys import builder_key, config_key
from seolocal.config import Config, TaxonomyConfig
from seolocal.server import create_app


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        """Create app with valid configuration."""
        app = create_app(test_config)

        assert app[config_key] is test_config
        assert app[builder_key].site.base_url == "https://example.com"
        assert len(app[builder_key].entries()) == 14

    def test__duplicate_slugs__raise(self, test_config: Config) -> None:
        """Fail at startup for taxonomies with colliding slugs."""
        config = Config(
            server=test_config.server,
            site=test_config.site,
            taxonomy=TaxonomyConfig(cities=["Santos", "santos"]),
        )

        with pytest.raises(ValueError, match="Duplicate slug"):
            create_app(config)


class TestSitemapRoutes:
    """Tests for sitemap and robots routes."""

    @pytest.mark.asyncio
    async def test__sitemap__lists_all_pages(
        self, aiohttp_client: Any, test_config: Config
    ) -> None:
        """Serve sitemap.xml for every entry."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/sitemap.xml")

        assert response.status == 200
        assert response.content_type == "application/xml"
        text = await response.text()
        assert text.count("<url>") == 14
        assert "<loc>https://example.com/geracao-de-leads-b2b-santos</loc>" in text

    @pytest.mark.asyncio
    async def test__robots__references_sitemap(
        self, aiohttp_client: Any, test_config: Config
    ) -> None:
        """Serve robots.txt pointing at the sitemap."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/robots.txt")

        assert response.status == 200
        assert "Sitemap: https://example.com/sitemap.xml" in await response.text()
