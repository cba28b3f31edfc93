"""Command line interface for pr-changelog."""

from __future__ import annotations

from pr_changelog.cli.main import app

__all__ = ["app"]
