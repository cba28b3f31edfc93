"""pr-changelog: changelog comments and next-version calculation for pull requests."""

from __future__ import annotations

__version__ = "0.1.0"
