"""Tests for entries API endpoint."""

from typing import Any

import pytest
from seolocal.config import Config
from seolocal.server import create_app


class TestGetEntries:
    """Tests for GET /api/entries."""

    @pytest.mark.asyncio
    async def test__lists_all_entries(
        self, aiohttp_client: Any, test_config: Config
    ) -> None:
        """List every entry in enumeration order."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/api/entries")

        assert response.status == 200
        data = await response.json()
        assert data["total"] == 14
        first = data["items"][0]
        assert first["slug"] == "geracao-de-leads-b2b-praia-grande"
        assert first["kind"] == "cidade"
        assert first["city"] == "Praia Grande"
        assert first["path"] == "/geracao-de-leads-b2b-praia-grande"
        assert first["title"] == "Geração de Leads B2B em Praia Grande | Innexar"
        assert "niche" not in first

    @pytest.mark.asyncio
    async def test__kind_filter(self, aiohttp_client: Any, test_config: Config) -> None:
        """Filter entries by kind."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/api/entries?kind=cidade")

        assert response.status == 200
        data = await response.json()
        assert data["total"] == 5

    @pytest.mark.asyncio
    async def test__unknown_kind__returns_400(
        self, aiohttp_client: Any, test_config: Config
    ) -> None:
        """Reject unknown kinds."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/api/entries?kind=planeta")

        assert response.status == 400
        data = await response.json()
        assert data["error"] == "Unknown kind"
