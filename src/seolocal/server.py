"""aiohttp server for Seolocal.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from seolocal.api.entries import create_entries_routes
from seolocal.api.pages import create_pages_routes
from seolocal.api.sitemap import create_sitemap_routes
from seolocal.app_keys import builder_key, config_key
from seolocal.config import Config
from seolocal.core.page import LandingPageBuilder

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        ValueError: If the configured taxonomy is invalid (e.g., duplicate slugs)
    """
    app = web.Application()

    # Building indexes the taxonomy, so taxonomy errors surface at startup
    builder = LandingPageBuilder(config.taxonomy.to_taxonomy(), config.site.to_settings())
    logger.info(f"Serving {len(builder.entries())} landing pages for {config.site.base_url}")

    app[config_key] = config
    app[builder_key] = builder

    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_entries_routes())
    app.router.add_routes(create_sitemap_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
