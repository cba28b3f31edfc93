"""Configuration management for pr-changelog."""

from __future__ import annotations

from pr_changelog.config.loader import load_config, load_inputs
from pr_changelog.config.models import (
    ActionInputs,
    ChangelogConfig,
    CommitsConfig,
    GitHubConfig,
    PrChangelogConfig,
)

__all__ = [
    "ActionInputs",
    "ChangelogConfig",
    "CommitsConfig",
    "GitHubConfig",
    "PrChangelogConfig",
    "load_config",
    "load_inputs",
]
