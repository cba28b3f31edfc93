"""Changelog rendering.

Builds the markdown body of the pull request comment from classified
commits. The body always starts with the banner line so that a later run
can find its own comment and replace it instead of adding a new one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pr_changelog.config.models import BANNER, ChangelogConfig
from pr_changelog.core.commits import Category, Commit, CommitClassification, group_by_category

# Section order in the rendered document. Category.NONE is never rendered.
SECTION_HEADINGS: dict[Category, str] = {
    Category.BREAKING: "### ⚠️ Breaking Changes",
    Category.FEATURE: "### 🚀 Features",
    Category.FIX: "### 🐛 Bug Fixes",
    Category.CHORE: "### 🔨 Chores",
}


@dataclass(frozen=True)
class ChangelogSection:
    heading: str
    entries: tuple[str, ...]


@dataclass(frozen=True)
class ChangelogDocument:
    """Ordered changelog sections under a banner."""

    sections: tuple[ChangelogSection, ...] = ()
    banner: str = BANNER

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def to_markdown(self) -> str:
        lines = [self.banner, ""]

        for section in self.sections:
            lines.append(section.heading)
            lines.append("")
            lines.extend(section.entries)
            lines.append("")

        return "\n".join(lines).rstrip() + "\n"

    def __str__(self) -> str:
        return self.to_markdown()


def format_entry(
    commit: Commit,
    classification: CommitClassification,
    config: ChangelogConfig | None = None,
) -> str:
    """Format one changelog bullet.

    The text is the commit description without its type token. If that is
    empty the raw subject is used instead.
    """
    config = config or ChangelogConfig()

    text = classification.description.strip() or commit.subject or commit.sha
    scope = f"**{classification.scope}:** " if config.include_scope and classification.scope else ""
    sha = f" ({commit.short_sha})" if config.include_sha and commit.sha else ""
    entry = f"- {scope}{text}{sha}"

    if config.show_files and commit.files:
        entry += "".join(f"\n  - `{path}`" for path in commit.files)

    return entry


def render_changelog(
    pairs: Iterable[tuple[Commit, CommitClassification]],
    config: ChangelogConfig | None = None,
) -> ChangelogDocument:
    """Render classified commits into a changelog document.

    Args:
        pairs: Commits with their classifications, in caller order
        config: Rendering options

    Returns:
        Document with one section per non-empty category
    """
    config = config or ChangelogConfig()
    grouped = group_by_category(pairs)

    sections = tuple(
        ChangelogSection(
            heading=heading,
            entries=tuple(format_entry(commit, c, config) for commit, c in grouped[category]),
        )
        for category, heading in SECTION_HEADINGS.items()
        if grouped[category]
    )

    return ChangelogDocument(sections=sections, banner=config.banner)
