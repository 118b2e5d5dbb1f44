"""Sitemap and robots.txt endpoints."""

from aiohttp import web

from seolocal.app_keys import builder_key
from seolocal.core.sitemap import robots_txt, sitemap_urls, sitemap_xml


def create_sitemap_routes() -> list[web.RouteDef]:
    return [
        web.get("/sitemap.xml", get_sitemap),
        web.get("/robots.txt", get_robots),
    ]


async def get_sitemap(request: web.Request) -> web.Response:
    builder = request.app[builder_key]
    urls = sitemap_urls(builder.entries(), builder.site.base_url)
    return web.Response(text=sitemap_xml(urls), content_type="application/xml")


async def get_robots(request: web.Request) -> web.Response:
    builder = request.app[builder_key]
    return web.Response(text=robots_txt(builder.site.base_url), content_type="text/plain")
