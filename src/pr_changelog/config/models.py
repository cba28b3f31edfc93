"""Pydantic models for pr-changelog configuration.

Two kinds of configuration exist:

- :class:`PrChangelogConfig` describes *how* commits are classified and
  rendered. It can be tuned in the ``[tool.pr-changelog]`` table of
  ``pyproject.toml`` and has sensible defaults.
- :class:`ActionInputs` describes *what* to run against: credentials, the
  target branch, the pull request and the optional current version. It is
  built once from the action environment and passed explicitly.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_BOT_LOGIN = "github-actions[bot]"

# First line of every changelog comment; used to find the previous one
BANNER = "# ✨ Changelog"


class CommitsConfig(BaseModel):
    """Commit type tables used by the classifier."""

    model_config = ConfigDict(extra="forbid")

    types_feature: list[str] = Field(default_factory=lambda: ["feat"])
    types_fix: list[str] = Field(default_factory=lambda: ["fix", "perf"])
    types_chore: list[str] = Field(
        default_factory=lambda: [
            "chore",
            "docs",
            "style",
            "refactor",
            "test",
            "build",
            "ci",
            "revert",
        ]
    )
    breaking_pattern: str = r"BREAKING[ -]CHANGE:"
    # Opt-in; markers such as "[skip release]" drop commits from both outputs
    skip_release_patterns: list[str] = Field(default_factory=list)

    @field_validator("types_feature", "types_fix", "types_chore")
    @classmethod
    def _lowercase_types(cls, value: list[str]) -> list[str]:
        return [t.strip().lower() for t in value if t.strip()]

    @field_validator("breaking_pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return value


class ChangelogConfig(BaseModel):
    """Rendering options for the changelog comment."""

    model_config = ConfigDict(extra="forbid")

    banner: str = BANNER
    include_scope: bool = True
    include_sha: bool = False
    show_files: bool = False


class GitHubConfig(BaseModel):
    """GitHub API settings."""

    model_config = ConfigDict(extra="forbid")

    api_url: str = "https://api.github.com"
    bot_login: str = DEFAULT_BOT_LOGIN
    timeout: float = 30.0
    per_page: int = Field(default=100, ge=1, le=100)


class PrChangelogConfig(BaseModel):
    """Root tool configuration."""

    model_config = ConfigDict(extra="forbid")

    commits: CommitsConfig = Field(default_factory=CommitsConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    max_workers: int = Field(default=8, ge=1)


class ActionInputs(BaseModel):
    """Inputs of a single action run."""

    model_config = ConfigDict(frozen=True)

    token: SecretStr
    branch: str
    current_version: str | None = None
    pr_number: int = Field(ge=1)
    owner: str
    repo: str

    @field_validator("branch", "owner", "repo")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @field_validator("current_version")
    @classmethod
    def _blank_version_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()
