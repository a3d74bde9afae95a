"""Command line interface for webstart."""

from webstart.cli.app import app

__all__ = ["app"]
