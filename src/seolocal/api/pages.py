"""Pages API endpoints.

Resolves a slug and returns the assembled landing page as JSON. Unknown
slugs are routine (most paths are not landing pages) and get a 404 that
tells the client where to redirect.
"""

import json
import logging
from hashlib import md5

from aiohttp import web

from seolocal.app_keys import builder_key
from seolocal.core.related import build_related_links, get_related_entries

logger = logging.getLogger(__name__)

REDIRECT_PATH = "/"


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/pages/{slug}/related", get_related),
        web.get("/api/pages/{slug}", get_page),
    ]


def _not_found(slug: str) -> web.Response:
    logger.debug(f"No landing page for slug {slug!r}")
    return web.json_response(
        {"error": "Page not found", "slug": slug, "redirect": REDIRECT_PATH},
        status=404,
    )


async def get_page(request: web.Request) -> web.Response:
    slug = request.match_info["slug"]
    builder = request.app[builder_key]

    page = builder.build(slug)
    if page is None:
        return _not_found(slug)

    body = json.dumps(page.to_dict(), ensure_ascii=False, sort_keys=True)
    etag = _compute_etag(body)

    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304)

    return web.Response(
        text=body,
        content_type="application/json",
        headers={
            "ETag": etag,
            "Cache-Control": "public, max-age=3600",
        },
    )


async def get_related(request: web.Request) -> web.Response:
    slug = request.match_info["slug"]
    builder = request.app[builder_key]

    entry = builder.resolve(slug)
    if entry is None:
        return _not_found(slug)

    limit_raw = request.query.get("limit")
    limit = builder.site.related_limit
    if limit_raw is not None:
        try:
            limit = int(limit_raw)
        except ValueError:
            return web.json_response(
                {"error": "limit must be an integer", "limit": limit_raw},
                status=400,
            )
        if limit < 0:
            return web.json_response(
                {"error": "limit must not be negative", "limit": limit_raw},
                status=400,
            )

    related = get_related_entries(entry, limit, builder.taxonomy)
    links = build_related_links(related)
    return web.json_response({"items": [link.to_dict() for link in links]})


def _compute_etag(content: str) -> str:
    # Pages are deterministic per slug and config, so the body hash is stable
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
