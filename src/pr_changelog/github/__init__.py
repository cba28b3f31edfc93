"""GitHub integration: REST client and the changelog comment gateway."""

from __future__ import annotations

from pr_changelog.github.client import GitHubClient
from pr_changelog.github.comments import CommentUpsertGateway, ExistingComment
from pr_changelog.github.parser import parse_commit_messages

__all__ = ["CommentUpsertGateway", "ExistingComment", "GitHubClient", "parse_commit_messages"]
