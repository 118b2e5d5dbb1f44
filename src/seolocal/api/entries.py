"""Entries API endpoint.

Lists every landing page in enumeration order, for route generation.
"""

from aiohttp import web

from seolocal.app_keys import builder_key
from seolocal.core.metadata import get_title
from seolocal.core.types import EntryKind


def create_entries_routes() -> list[web.RouteDef]:
    return [web.get("/api/entries", get_entries)]


async def get_entries(request: web.Request) -> web.Response:
    builder = request.app[builder_key]
    entries = builder.entries()

    kind_filter = request.query.get("kind")
    if kind_filter is not None:
        try:
            kind = EntryKind(kind_filter)
        except ValueError:
            return web.json_response(
                {"error": "Unknown kind", "kind": kind_filter},
                status=400,
            )
        entries = [entry for entry in entries if entry.kind is kind]

    items = [
        {
            **entry.to_dict(),
            "title": get_title(entry, brand=builder.site.brand),
            "path": f"/{entry.slug}",
        }
        for entry in entries
    ]
    return web.json_response({"items": items, "total": len(items)})
