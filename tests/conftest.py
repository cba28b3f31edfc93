"""Shared pytest fixtures."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from pr_changelog.core.commits import Commit

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def feat_commit() -> Commit:
    return Commit("feat1234567", "feat: add user authentication", ("src/auth.py",))


@pytest.fixture
def fix_commit() -> Commit:
    return Commit("fix1234567", "fix(core): handle null response", ("src/core.py",))


@pytest.fixture
def breaking_commit() -> Commit:
    return Commit(
        "brk1234567",
        "feat(api): new endpoint layout\n\nBREAKING CHANGE: /v1 routes removed",
        ("src/api.py",),
    )


@pytest.fixture
def chore_commit() -> Commit:
    return Commit("cho1234567", "chore: update deps", ("requirements.txt",))


@pytest.fixture
def sample_commits(
    feat_commit: Commit,
    fix_commit: Commit,
    breaking_commit: Commit,
    chore_commit: Commit,
) -> list[Commit]:
    return [
        feat_commit,
        fix_commit,
        Commit("doc1234567", "docs: update readme", ("README.md",)),
        breaking_commit,
        chore_commit,
        Commit("oth1234567", "Updated some stuff", ()),
    ]


@pytest.fixture
def event_payload(tmp_path: Path) -> Path:
    """A pull_request event payload file."""
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps(
            {
                "pull_request": {"number": 42},
                "repository": {"name": "widgets", "owner": {"login": "acme"}},
            }
        )
    )
    return path


@pytest.fixture
def action_env(event_payload: Path) -> dict[str, str]:
    return {
        "INPUT_TOKEN": "ghs_secret",
        "INPUT_BRANCH": "main",
        "INPUT_VERSION": "1.2.3",
        "GITHUB_EVENT_PATH": str(event_payload),
    }
