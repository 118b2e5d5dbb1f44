"""CLI interface for Seolocal.

Command-line tool for serving and inspecting local SEO landing pages.
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from seolocal.config import Config
from seolocal.core.page import LandingPageBuilder
from seolocal.core.sitemap import sitemap_urls, sitemap_xml
from seolocal.core.types import EntryKind

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover seolocal.toml)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def cli(verbose: bool) -> None:
    """Seolocal - programmatic local SEO landing pages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_config_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--base-url",
    default=None,
    help="Public site origin for canonical URLs (overrides config)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    base_url: str | None,
) -> None:
    """Start the landing page API server."""
    from seolocal.server import run_server

    try:
        config = _load_config(config_path).with_overrides(
            host=host, port=port, base_url=base_url
        )
    except ValueError as e:
        _fail(str(e))

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Base URL: {config.site.base_url}")

    try:
        run_server(config)
    except ValueError as e:
        _fail(str(e))


@cli.command("list")
@_config_option
@click.option(
    "--kind",
    "-k",
    type=click.Choice([kind.value for kind in EntryKind]),
    default=None,
    help="Only list entries of this kind",
)
def list_entries(config_path: Path | None, kind: str | None) -> None:
    """List landing page slugs in enumeration order."""
    builder = _create_builder(config_path)
    entries = builder.entries()
    if kind is not None:
        entries = [entry for entry in entries if entry.kind.value == kind]

    for entry in entries:
        click.echo(entry.slug)


@cli.command()
@click.argument("slug")
@_config_option
def show(slug: str, config_path: Path | None) -> None:
    """Print the landing page for SLUG as JSON."""
    builder = _create_builder(config_path)
    page = builder.build(slug)
    if page is None:
        _fail(f"No landing page for slug: {slug}")

    click.echo(json.dumps(page.to_dict(), ensure_ascii=False, indent=2))


@cli.command()
@_config_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write sitemap to this file instead of stdout",
)
def sitemap(config_path: Path | None, output: Path | None) -> None:
    """Generate sitemap.xml for all landing pages."""
    builder = _create_builder(config_path)
    xml = sitemap_xml(sitemap_urls(builder.entries(), builder.site.base_url))

    if output is None:
        click.echo(xml, nl=False)
        return

    output.write_text(xml, encoding="utf-8")
    click.echo(
        click.style(f"Wrote {len(builder.entries())} URLs to {output}", fg="green"),
    )


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


def _create_builder(config_path: Path | None) -> LandingPageBuilder:
    """Build a page builder from configuration or exit with error."""
    config = _load_config(config_path)
    try:
        return LandingPageBuilder(
            config.taxonomy.to_taxonomy(),
            config.site.to_settings(),
        )
    except ValueError as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
