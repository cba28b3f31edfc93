"""Semantic version parsing and bumping.

Versions are plain ``MAJOR.MINOR.PATCH`` triples. A leading ``v`` (as used
by git tags) is accepted and kept, so ``v1.2.3`` bumps to ``v1.3.0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import StrEnum

from pr_changelog.exceptions import InvalidVersionFormat

VERSION_PATTERN = re.compile(
    r"(?P<prefix>[vV]?)(?P<major>0|[1-9][0-9]*)\.(?P<minor>0|[1-9][0-9]*)\.(?P<patch>0|[1-9][0-9]*)"
)


class BumpType(StrEnum):
    """Severity mask contributed by a commit or a whole commit set."""

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

    @property
    def severity(self) -> int:
        return BUMP_PRECEDENCE.index(self)


# Lowest to highest severity.
BUMP_PRECEDENCE: tuple[BumpType, ...] = (
    BumpType.NONE,
    BumpType.PATCH,
    BumpType.MINOR,
    BumpType.MAJOR,
)


def max_bump(*bumps: BumpType) -> BumpType:
    """Return the most severe of the given bump types (NONE when empty)."""
    return max(bumps, key=lambda b: b.severity, default=BumpType.NONE)


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A ``MAJOR.MINOR.PATCH`` version.

    Ordering compares the numeric components only; ``prefix`` is carried
    along for rendering.
    """

    major: int
    minor: int
    patch: int
    prefix: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise InvalidVersionFormat(f"{self.major}.{self.minor}.{self.patch}")

    def __str__(self) -> str:
        return f"{self.prefix}{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        return parse_version(text)

    def bump(self, bump_type: BumpType) -> SemanticVersion:
        """Return the next version for ``bump_type``.

        ``BumpType.NONE`` returns this instance unchanged.
        """
        if bump_type == BumpType.MAJOR:
            return replace(self, major=self.major + 1, minor=0, patch=0)
        if bump_type == BumpType.MINOR:
            return replace(self, minor=self.minor + 1, patch=0)
        if bump_type == BumpType.PATCH:
            return replace(self, patch=self.patch + 1)
        return self


def parse_version(text: str) -> SemanticVersion:
    """Parse a version string.

    Args:
        text: Version such as ``1.2.3`` or ``v1.2.3``

    Returns:
        Parsed SemanticVersion

    Raises:
        InvalidVersionFormat: If the string is not three dot-separated integers
            without leading zeros
    """
    match = VERSION_PATTERN.fullmatch(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise InvalidVersionFormat(str(text))

    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prefix=match.group("prefix"),
    )


def bump_version(current: str, bump_type: BumpType) -> str:
    """Parse ``current``, apply ``bump_type`` and render the result."""
    return str(parse_version(current).bump(bump_type))
