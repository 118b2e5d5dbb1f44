"""Configuration management for Seolocal.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from seolocal.core.content import DEFAULT_PRODUCT
from seolocal.core.metadata import DEFAULT_BRAND, DEFAULT_IMAGE_PATH
from seolocal.core.page import DEFAULT_BASE_URL, SiteSettings
from seolocal.core.related import DEFAULT_RELATED_LIMIT
from seolocal.core.taxonomy import DEFAULT_REGION, DEFAULT_TAXONOMY, Taxonomy, TaxonomyItem

CONFIG_FILENAME = "seolocal.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SiteConfig:
    """Site identity configuration."""

    base_url: str = DEFAULT_BASE_URL
    brand: str = DEFAULT_BRAND
    product: str = DEFAULT_PRODUCT
    image_path: str = DEFAULT_IMAGE_PATH
    related_limit: int = DEFAULT_RELATED_LIMIT

    def to_settings(self) -> SiteSettings:
        """Convert to the settings used by the page builder."""
        return SiteSettings(
            base_url=self.base_url,
            brand=self.brand,
            product=self.product,
            image_path=self.image_path,
            related_limit=self.related_limit,
        )


@dataclass
class TaxonomyConfig:
    """Taxonomy configuration.

    Defaults to the built-in taxonomy when the section is absent. Items are
    display names, or TaxonomyItem values when a slug is pinned.
    """

    cities: list[str | TaxonomyItem] = field(
        default_factory=lambda: [item.name for item in DEFAULT_TAXONOMY.cities],
    )
    niches: list[str | TaxonomyItem] = field(
        default_factory=lambda: [item.name for item in DEFAULT_TAXONOMY.niches],
    )
    neighborhoods: list[str | TaxonomyItem] = field(default_factory=list)
    region: str | None = DEFAULT_REGION
    niche_limit: int = 3
    city_limit: int = 3

    def to_taxonomy(self) -> Taxonomy:
        """Build the immutable taxonomy.

        Raises:
            ValueError: If a name has no slug or a limit is negative
        """
        return Taxonomy(
            cities=tuple(_to_item(value) for value in self.cities),
            niches=tuple(_to_item(value) for value in self.niches),
            neighborhoods=tuple(_to_item(value) for value in self.neighborhoods),
            region=self.region,
            niche_limit=self.niche_limit,
            city_limit=self.city_limit,
        )


def _is_absolute_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def _to_item(value: str | TaxonomyItem) -> TaxonomyItem:
    if isinstance(value, TaxonomyItem):
        return value
    return TaxonomyItem(value)


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    taxonomy: TaxonomyConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for seolocal.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            site=SiteConfig(),
            taxonomy=TaxonomyConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        server = cls._parse_server(data.get("server"))
        site = cls._parse_site(data.get("site"))
        taxonomy = cls._parse_taxonomy(data.get("taxonomy"))

        return cls(
            server=server,
            site=site,
            taxonomy=taxonomy,
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        defaults = SiteConfig()
        values: dict[str, str] = {}
        for key in ("base_url", "brand", "product", "image_path"):
            value = data.get(key, getattr(defaults, key))
            if not isinstance(value, str):
                raise ValueError(f"site.{key} must be a string")
            values[key] = value

        if not _is_absolute_url(values["base_url"]):
            raise ValueError("site.base_url must be an absolute http(s) URL")

        related_limit = data.get("related_limit", defaults.related_limit)
        if not isinstance(related_limit, int) or isinstance(related_limit, bool):
            raise ValueError("site.related_limit must be an integer")
        if related_limit < 0:
            raise ValueError("site.related_limit must not be negative")

        return SiteConfig(
            base_url=values["base_url"].rstrip("/"),
            brand=values["brand"],
            product=values["product"],
            image_path=values["image_path"],
            related_limit=related_limit,
        )

    @classmethod
    def _parse_taxonomy(cls, data: object) -> TaxonomyConfig:
        """Parse taxonomy configuration section.

        Args:
            data: Raw taxonomy section data

        Returns:
            TaxonomyConfig instance
        """
        if data is None:
            return TaxonomyConfig()

        if not isinstance(data, dict):
            raise ValueError("taxonomy section must be a dictionary")

        defaults = TaxonomyConfig()
        cities = cls._parse_name_list(data, "cities", defaults.cities)
        niches = cls._parse_name_list(data, "niches", defaults.niches)
        neighborhoods = cls._parse_name_list(data, "neighborhoods", defaults.neighborhoods)

        region = data.get("region", defaults.region)
        if region is not None and not isinstance(region, str):
            raise ValueError("taxonomy.region must be a string")

        limits: dict[str, int] = {}
        for key in ("niche_limit", "city_limit"):
            value = data.get(key, getattr(defaults, key))
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"taxonomy.{key} must be an integer")
            if value < 0:
                raise ValueError(f"taxonomy.{key} must not be negative")
            limits[key] = value

        return TaxonomyConfig(
            cities=cities,
            niches=niches,
            neighborhoods=neighborhoods,
            region=region,
            niche_limit=limits["niche_limit"],
            city_limit=limits["city_limit"],
        )

    @staticmethod
    def _parse_name_list(
        data: dict,
        key: str,
        default: list[str | TaxonomyItem],
    ) -> list[str | TaxonomyItem]:
        """Parse a list of names or {name, slug} tables."""
        raw = data.get(key)
        if raw is None:
            return list(default)
        if not isinstance(raw, list):
            raise ValueError(f"taxonomy.{key} must be a list")
        items: list[str | TaxonomyItem] = []
        for item in raw:
            if isinstance(item, dict):
                name = item.get("name")
                slug = item.get("slug", "")
                if not isinstance(name, str) or not name.strip():
                    raise ValueError(f"taxonomy.{key} items must have a non-empty name")
                if not isinstance(slug, str):
                    raise ValueError(f"taxonomy.{key} item slug must be a string")
                try:
                    items.append(TaxonomyItem(name.strip(), slug))
                except ValueError as e:
                    raise ValueError(f"taxonomy.{key}: {e}") from e
                continue
            if not isinstance(item, str) or not item.strip():
                raise ValueError(f"taxonomy.{key} items must be non-empty strings")
            items.append(item.strip())
        return items
    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        base_url: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            base_url: Override site.base_url

        Returns:
            New Config instance with overrides applied

        Raises:
            ValueError: If base_url is not an absolute http(s) URL
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        site = self.site
        if base_url is not None:
            if not _is_absolute_url(base_url):
                raise ValueError(f"base_url must be an absolute http(s) URL: {base_url}")
            site = replace(self.site, base_url=base_url.rstrip("/"))

        return replace(self, server=server, site=site)
