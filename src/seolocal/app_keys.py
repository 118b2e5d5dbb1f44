"""Application keys for type-safe app configuration access."""

from aiohttp import web

from seolocal.config import Config
from seolocal.core.page import LandingPageBuilder

builder_key = web.AppKey("builder", LandingPageBuilder)
config_key = web.AppKey("config", Config)
