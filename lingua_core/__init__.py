"""Stable, content-addressed keys for source texts and their translations."""

__version__ = "0.1.0"
