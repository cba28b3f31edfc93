"""Core business logic for pr-changelog.

This module contains the pure building blocks:
- Commit classification (conventional commits and breaking markers)
- Changelog rendering
- Version mask resolution and semantic version bumping
"""

from __future__ import annotations

from pr_changelog.core.changelog import BANNER, ChangelogDocument, ChangelogSection, render_changelog
from pr_changelog.core.commits import (
    Category,
    Commit,
    CommitClassification,
    classify,
    classify_commits,
    resolve_mask,
)
from pr_changelog.core.pipeline import PipelineResult, run_pipeline
from pr_changelog.core.version import BumpType, SemanticVersion, bump_version, parse_version

__all__ = [
    "BANNER",
    "BumpType",
    "Category",
    "ChangelogDocument",
    "ChangelogSection",
    "Commit",
    "CommitClassification",
    "PipelineResult",
    "SemanticVersion",
    "bump_version",
    "classify",
    "classify_commits",
    "parse_version",
    "render_changelog",
    "resolve_mask",
    "run_pipeline",
]
