"""Allow ``python -m pr_changelog``."""

from __future__ import annotations

from pr_changelog.cli import app

app()
