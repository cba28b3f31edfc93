"""Commit classification.

Each commit of a pull request is mapped to a :class:`Category` by walking
an ordered list of rules (:data:`CLASSIFICATION_RULES`). The first rule
that matches decides. Every category maps to exactly one bump type, and
the bump for the whole pull request is the most severe one.

Commit messages are untrusted free text: classification never raises,
anything it does not understand becomes ``Category.NONE``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from pr_changelog.config.models import CommitsConfig
from pr_changelog.core.version import BumpType, max_bump

# type(scope)!: description
CONVENTIONAL_PATTERN = re.compile(
    r"^(?P<type>[A-Za-z][A-Za-z0-9_-]*)"
    r"(?:\((?P<scope>[^()\r\n]*)\))?"
    r"(?P<breaking>!)?"
    r":\s*(?P<description>.*)$"
)
MERGE_PATTERN = re.compile(r"^Merge (?:pull request|branch|remote-tracking branch)\b")
REVERT_PATTERN = re.compile(r'^Revert\s+"(?P<reverted>.+)"\s*$')


@dataclass(frozen=True)
class Commit:
    """A pull request commit with the files it touched."""

    sha: str
    message: str
    files: tuple[str, ...] = ()

    @property
    def subject(self) -> str:
        lines = self.message.strip().splitlines()
        return lines[0].strip() if lines else ""

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


class Category(StrEnum):
    """Changelog category of a commit."""

    BREAKING = "breaking"
    FEATURE = "feature"
    FIX = "fix"
    CHORE = "chore"
    NONE = "none"


CATEGORY_MASKS: dict[Category, BumpType] = {
    Category.BREAKING: BumpType.MAJOR,
    Category.FEATURE: BumpType.MINOR,
    Category.FIX: BumpType.PATCH,
    Category.CHORE: BumpType.NONE,
    Category.NONE: BumpType.NONE,
}


@dataclass(frozen=True)
class CommitClassification:
    """Result of classifying one commit.

    ``mask`` is derived from ``category`` and cannot be set independently.
    """

    sha: str
    category: Category
    description: str
    commit_type: str | None = None
    scope: str | None = None
    mask: BumpType = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mask", CATEGORY_MASKS[self.category])


@dataclass(frozen=True)
class _Subject:
    """Conventional commit pieces of a subject line (all None if not conventional)."""

    commit_type: str | None = None
    scope: str | None = None
    bang: bool = False
    description: str | None = None

    @classmethod
    def parse(cls, subject: str) -> _Subject:
        match = CONVENTIONAL_PATTERN.match(subject)
        if not match:
            return cls()
        scope = match.group("scope")
        return cls(
            commit_type=match.group("type").lower(),
            scope=(scope.strip() or None) if scope is not None else None,
            bang=match.group("breaking") is not None,
            description=match.group("description").strip(),
        )


Rule = Callable[[Commit, _Subject, CommitsConfig], Category | None]


def _merge_rule(commit: Commit, _subject: _Subject, _config: CommitsConfig) -> Category | None:
    return Category.NONE if MERGE_PATTERN.match(commit.subject) else None


def _breaking_rule(commit: Commit, subject: _Subject, config: CommitsConfig) -> Category | None:
    if subject.bang or re.search(config.breaking_pattern, commit.message):
        return Category.BREAKING
    return None


def _revert_rule(commit: Commit, _subject: _Subject, _config: CommitsConfig) -> Category | None:
    return Category.CHORE if REVERT_PATTERN.match(commit.subject) else None


def _type_rule(_commit: Commit, subject: _Subject, config: CommitsConfig) -> Category | None:
    if subject.commit_type is None:
        return None
    if subject.commit_type in config.types_feature:
        return Category.FEATURE
    if subject.commit_type in config.types_fix:
        return Category.FIX
    if subject.commit_type in config.types_chore:
        return Category.CHORE
    return None


# Evaluated in order; the first rule returning a category wins.
CLASSIFICATION_RULES: tuple[tuple[str, Rule], ...] = (
    ("merge", _merge_rule),
    ("breaking", _breaking_rule),
    ("revert", _revert_rule),
    ("type", _type_rule),
)


def classify(commit: Commit, config: CommitsConfig | None = None) -> CommitClassification:
    """Classify a single commit.

    Args:
        commit: Commit to classify
        config: Commit type tables (defaults apply when omitted)

    Returns:
        The classification; unknown message shapes yield ``Category.NONE``
    """
    config = config or CommitsConfig()
    subject = _Subject.parse(commit.subject)

    category = Category.NONE
    for _name, rule in CLASSIFICATION_RULES:
        matched = rule(commit, subject, config)
        if matched is not None:
            category = matched
            break

    description = subject.description or commit.subject
    return CommitClassification(
        sha=commit.sha,
        category=category,
        description=description,
        commit_type=subject.commit_type,
        scope=subject.scope,
    )


def classify_commits(
    commits: Iterable[Commit],
    config: CommitsConfig | None = None,
) -> list[tuple[Commit, CommitClassification]]:
    """Classify commits, keeping each commit next to its classification."""
    config = config or CommitsConfig()
    return [(commit, classify(commit, config)) for commit in commits]


def resolve_mask(classifications: Iterable[CommitClassification]) -> BumpType:
    """Fold per-commit masks into the aggregate mask (NONE when empty)."""
    return max_bump(*(c.mask for c in classifications))


def group_by_category(
    pairs: Iterable[tuple[Commit, CommitClassification]],
) -> dict[Category, list[tuple[Commit, CommitClassification]]]:
    """Bucket classified commits by category, preserving input order."""
    grouped: dict[Category, list[tuple[Commit, CommitClassification]]] = {c: [] for c in Category}
    for commit, classification in pairs:
        grouped[classification.category].append((commit, classification))
    return grouped


def filter_skip_release_commits(commits: Sequence[Commit], patterns: Sequence[str]) -> list[Commit]:
    """Drop commits whose message contains any skip marker (case-insensitive)."""
    if not patterns:
        return list(commits)

    lowered = [p.lower() for p in patterns]
    return [c for c in commits if not any(p in c.message.lower() for p in lowered)]
