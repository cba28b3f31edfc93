"""Version control helpers."""

from __future__ import annotations

from pr_changelog.vcs.git import GitRepository

__all__ = ["GitRepository"]
