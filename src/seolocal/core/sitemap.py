"""Sitemap and robots.txt generation."""

import html
from collections.abc import Iterable
from datetime import date

from seolocal.core.metadata import canonical_url
from seolocal.core.types import PageEntry

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def sitemap_urls(entries: Iterable[PageEntry], base_url: str) -> list[str]:
    """Absolute page URLs for entries, in the given order."""
    return [canonical_url(entry, base_url) for entry in entries]


def sitemap_xml(urls: list[str], lastmod: date | None = None) -> str:
    """Render a sitemaps.org urlset.

    Args:
        urls: Absolute page URLs
        lastmod: Optional last modification date applied to every URL

    Returns:
        XML document
    """
    lastmod_tag = f"<lastmod>{lastmod.isoformat()}</lastmod>" if lastmod else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        + "".join(
            f"  <url><loc>{html.escape(url, quote=True)}</loc>{lastmod_tag}</url>\n"
            for url in urls
        )
        + "</urlset>\n"
    )


def robots_txt(base_url: str) -> str:
    """Allow-all robots.txt pointing at the sitemap."""
    return f"User-agent: *\nAllow: /\nSitemap: {base_url.rstrip('/')}/sitemap.xml\n"
