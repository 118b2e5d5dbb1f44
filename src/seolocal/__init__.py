"""Seolocal - programmatic local SEO landing pages."""
