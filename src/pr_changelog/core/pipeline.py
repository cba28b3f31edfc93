"""Changelog and next-version pipeline.

Pure composition of the core steps: classify every commit, render the
changelog, fold the masks and bump the current version. Must only be
called with the complete, already fetched commit set of a pull request.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pr_changelog.config.models import PrChangelogConfig
from pr_changelog.core.changelog import ChangelogDocument, render_changelog
from pr_changelog.core.commits import (
    Commit,
    CommitClassification,
    classify_commits,
    filter_skip_release_commits,
    resolve_mask,
)
from pr_changelog.core.version import BumpType, SemanticVersion, parse_version
from pr_changelog.exceptions import InvalidVersionFormat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    document: ChangelogDocument
    mask: BumpType
    classifications: tuple[CommitClassification, ...]
    current_version: SemanticVersion | None = None
    next_version: SemanticVersion | None = None
    version_error: str | None = None

    @property
    def content(self) -> str:
        return self.document.to_markdown()


def compute_next_version(
    current_version: str | None,
    mask: BumpType,
) -> tuple[SemanticVersion | None, SemanticVersion | None]:
    """Return ``(current, next)`` for a version string and aggregate mask.

    ``next`` is None when there is no current version or nothing to bump.

    Raises:
        InvalidVersionFormat: If ``current_version`` cannot be parsed
    """
    if current_version is None:
        return None, None

    current = parse_version(current_version)
    if mask == BumpType.NONE:
        return current, None
    return current, current.bump(mask)


def run_pipeline(
    commits: Sequence[Commit],
    current_version: str | None,
    config: PrChangelogConfig | None = None,
) -> PipelineResult:
    """Run classification, rendering and version bumping.

    Args:
        commits: Every commit of the pull request, in platform order
        current_version: Version to bump, or None to skip bumping
        config: Tool configuration

    Returns:
        Rendered changelog, aggregate mask and next version (if any)
    """
    config = config or PrChangelogConfig()

    kept = filter_skip_release_commits(commits, config.commits.skip_release_patterns)
    if len(kept) != len(commits):
        logger.info("Skipping %d commit(s) with skip release markers", len(commits) - len(kept))

    pairs = classify_commits(kept, config.commits)
    for commit, classification in pairs:
        logger.debug("%s -> %s (%s)", commit.short_sha, classification.category, classification.mask)

    document = render_changelog(pairs, config.changelog)
    classifications = tuple(c for _, c in pairs)
    mask = resolve_mask(classifications)
    logger.info("Aggregate version mask: %s", mask)

    try:
        current, next_version = compute_next_version(current_version, mask)
    except InvalidVersionFormat as e:
        logger.warning("Not bumping version: %s", e)
        return PipelineResult(
            document=document,
            mask=mask,
            classifications=classifications,
            version_error=str(e),
        )

    return PipelineResult(
        document=document,
        mask=mask,
        classifications=classifications,
        current_version=current,
        next_version=next_version,
    )
