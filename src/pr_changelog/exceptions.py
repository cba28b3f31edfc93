"""Exception hierarchy for pr-changelog.

Every error raised by the package derives from :class:`PrChangelogError`,
so the command line layer can report any failure with a single handler.
"""

from __future__ import annotations


class PrChangelogError(Exception):
    """Base class for all pr-changelog errors."""


# Configuration


class ConfigError(PrChangelogError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml or event payload was found."""


class ConfigValidationError(ConfigError):
    """Configuration values are missing or invalid."""


# Versions


class VersionError(PrChangelogError):
    """Base class for version related errors."""


class InvalidVersionFormat(VersionError):
    """A version string is not in MAJOR.MINOR.PATCH form."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid version format: {value!r}. Expected MAJOR.MINOR.PATCH, optionally prefixed by 'v'."
        )
        self.value = value


# External collaborators


class GitError(PrChangelogError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}\n{self.stderr.strip()}"
        return base


class GitHubAPIError(PrChangelogError):
    """The GitHub REST API returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
