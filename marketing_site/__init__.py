"""Locale-aware marketing site backed by a headless CMS."""

__version__ = "1.0.0"
